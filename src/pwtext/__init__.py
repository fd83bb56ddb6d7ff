# topmark:header:start
#
#   project      : PwText
#   file         : __init__.py
#   file_relpath : src/pwtext/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText package.

PwText converts text among UTF-16 code units, flat 32-bit code points and UTF-8
bytes. Every conversion has a secure-output variant returning a
`pwtext.secure.SecureBuffer` whose storage is zeroed on release, and a growable
printf-style formatter builds user-facing messages.

The public API is re-exported here; see `pwtext.transcode`,
`pwtext.bridge.utf8` and `pwtext.formatting.formatter` for details.
"""

from __future__ import annotations

from pwtext.bridge.backend import CodecsDecoder, CodecsEncoder, DecodeCapability, EncodeCapability
from pwtext.bridge.utf8 import (
    text_to_utf8,
    text_to_utf8_secure,
    utf8_to_text,
    utf8_to_text_secure,
)
from pwtext.core.counting import (
    count_code_points,
    count_utf8_bytes_needed,
    count_utf16_units_needed,
)
from pwtext.core.surrogates import (
    decode_units_to_code_points,
    encode_ascii_to_code_points,
    encode_code_points_to_units,
)
from pwtext.core.text import str_to_units, units_to_str
from pwtext.core.types import SurrogatePolicy
from pwtext.errors import (
    DecodingError,
    EncodingError,
    FormatError,
    InvalidEncoding,
    PwTextError,
)
from pwtext.formatting.formatter import format_text, format_text_args, format_text_secure
from pwtext.secure.allocators import HeapAllocator, LockedAllocator
from pwtext.secure.buffer import SecureBuffer
from pwtext.transcode import (
    ascii_to_code_points,
    ascii_to_code_points_secure,
    code_points_to_units,
    code_points_to_units_secure,
    units_to_code_points,
    units_to_code_points_secure,
)

__all__ = [
    "CodecsDecoder",
    "CodecsEncoder",
    "DecodeCapability",
    "DecodingError",
    "EncodeCapability",
    "EncodingError",
    "FormatError",
    "HeapAllocator",
    "InvalidEncoding",
    "LockedAllocator",
    "PwTextError",
    "SecureBuffer",
    "SurrogatePolicy",
    "ascii_to_code_points",
    "ascii_to_code_points_secure",
    "code_points_to_units",
    "code_points_to_units_secure",
    "count_code_points",
    "count_utf16_units_needed",
    "count_utf8_bytes_needed",
    "decode_units_to_code_points",
    "encode_ascii_to_code_points",
    "encode_code_points_to_units",
    "format_text",
    "format_text_args",
    "format_text_secure",
    "str_to_units",
    "text_to_utf8",
    "text_to_utf8_secure",
    "units_to_code_points",
    "units_to_code_points_secure",
    "units_to_str",
    "utf8_to_text",
    "utf8_to_text_secure",
]
