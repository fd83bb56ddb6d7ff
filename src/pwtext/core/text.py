# topmark:header:start
#
#   project      : PwText
#   file         : text.py
#   file_relpath : src/pwtext/core/text.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Conversions between Python ``str`` and UTF-16 code-unit sequences.

Python strings hold code points and may contain lone surrogates; the
``surrogatepass`` error handler lets those travel through UTF-16 unchanged, so
`units_to_str(str_to_units(s)) == s` for every ``s``.
"""

from __future__ import annotations

import sys
from array import array
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pwtext.core.types import CodeUnits

# UTF-16 codec matching the byte order of ``array("H")``.
UTF16_NATIVE: Final[str] = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"


def str_to_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text``."""
    if not text:
        return []
    units = array("H")
    units.frombytes(text.encode(UTF16_NATIVE, "surrogatepass"))
    return units.tolist()


def units_to_str(units: CodeUnits, errors: str = "surrogatepass") -> str:
    """Return the ``str`` spelled by UTF-16 ``units``.

    Well-formed surrogate pairs combine into one character. With the default
    ``errors="surrogatepass"`` lone surrogates are kept as-is; ``"strict"``
    raises ``UnicodeDecodeError`` instead.
    """
    if not units:
        return ""
    return array("H", units).tobytes().decode(UTF16_NATIVE, errors)


def utf16_length(text: str) -> int:
    """Return the length of ``text`` in UTF-16 code units."""
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)
