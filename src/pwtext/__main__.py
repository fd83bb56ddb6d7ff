# topmark:header:start
#
#   project      : PwText
#   file         : __main__.py
#   file_relpath : src/pwtext/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Allow ``python -m pwtext``."""

from __future__ import annotations

from pwtext.cli.main import cli

if __name__ == "__main__":
    cli()
