# topmark:header:start
#
#   project      : PwText
#   file         : keys.py
#   file_relpath : src/pwtext/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Canonical TOML section and key names for PwText configuration.

These strings are the external configuration API as it appears in
``pwtext.toml`` and in ``[tool.pwtext]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change. The ordering mirrors ``pwtext-default.toml``.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PwText configuration."""

    # [tool.<name>] in pyproject.toml
    TOOL_SECTION: Final[str] = "pwtext"

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [codec]
    SECTION_CODEC: Final[str] = "codec"
    KEY_SURROGATE_POLICY: Final[str] = "surrogate_policy"

    # [utf8]
    SECTION_UTF8: Final[str] = "utf8"
    KEY_ERRORS: Final[str] = "errors"

    # [format]
    SECTION_FORMAT: Final[str] = "format"
    KEY_MARGIN: Final[str] = "margin"

    # [secure]
    SECTION_SECURE: Final[str] = "secure"
    KEY_LOCK_MEMORY: Final[str] = "lock_memory"
