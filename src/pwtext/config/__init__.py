# topmark:header:start
#
#   project      : PwText
#   file         : __init__.py
#   file_relpath : src/pwtext/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText configuration and logging.

The runtime `pwtext.config.model.Config` and its mutable builder live in
`pwtext.config.model`; logging helpers in `pwtext.config.logging`. This package
module stays import-free because every other PwText module imports
`pwtext.config.logging`.
"""
