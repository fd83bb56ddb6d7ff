# topmark:header:start
#
#   project      : PwText
#   file         : __init__.py
#   file_relpath : src/pwtext/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Command-line interface for inspecting and converting text with PwText."""
