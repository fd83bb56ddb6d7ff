# topmark:header:start
#
#   project      : PwText
#   file         : __init__.py
#   file_relpath : src/pwtext/bridge/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""UTF-8 bridge: sizing and filling through an external transcoding capability."""
