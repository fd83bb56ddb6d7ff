# topmark:header:start
#
#   project      : PwText
#   file         : constants.py
#   file_relpath : src/pwtext/constants.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    PWTEXT_VERSION: str = get_version("pwtext")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    PWTEXT_VERSION = "0.0.0"

# Name of the bundled default config inside the package `pwtext.config`:
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "pwtext.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "pwtext-default.toml"

# Project config discovery
PWTEXT_TOML_NAME: Final[str] = "pwtext.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# UTF-16 surrogate ranges
HIGH_SURROGATE_MIN: Final[int] = 0xD800
HIGH_SURROGATE_MAX: Final[int] = 0xDBFF
LOW_SURROGATE_MIN: Final[int] = 0xDC00
LOW_SURROGATE_MAX: Final[int] = 0xDFFF

MAX_BMP: Final[int] = 0xFFFF
MAX_CODE_POINT: Final[int] = 0x10FFFF
SUPPLEMENTARY_BASE: Final[int] = 0x10000

# Growable formatter: initial capacity is ``template_length * 2 + FORMAT_MARGIN``.
FORMAT_MARGIN: Final[int] = 50
FORMAT_ATTEMPTS: Final[int] = 2
