# topmark:header:start
#
#   project      : PwText
#   file         : __init__.py
#   file_relpath : src/pwtext/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText CLI subcommands."""
