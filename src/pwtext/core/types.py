# topmark:header:start
#
#   project      : PwText
#   file         : types.py
#   file_relpath : src/pwtext/core/types.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Shared types for the conversion layer.

Code-unit and code-point sequences are plain ``Sequence[int]`` values that carry
their own length; nothing in PwText relies on a terminating zero. Writers accept
any `IntSink`: a pre-sized ``list[int]``, an ``array.array`` or the typed
memoryview returned by `pwtext.secure.SecureBuffer.writable`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeAlias, Union

from pwtext.core.enum_mixins import KeyedStrEnum

CodeUnits: TypeAlias = Sequence[int]
"""UTF-16 code units, each in ``[0, 0xFFFF]``."""

CodePoints: TypeAlias = Sequence[int]
"""Unicode scalar values, one per character."""

Text: TypeAlias = Union[str, Sequence[int]]
"""Either a Python ``str`` or a UTF-16 code-unit sequence."""

ByteSource: TypeAlias = Union[bytes, bytearray, memoryview]


class IntSink(Protocol):
    """A pre-sized, index-writable destination for code units or code points."""

    def __len__(self) -> int: ...

    def __setitem__(self, index: int, value: int, /) -> None: ...


class SurrogatePolicy(KeyedStrEnum):
    """How a low surrogate without a preceding high surrogate is decoded.

    A high surrogate that is not followed by a low surrogate is always invalid;
    this policy only governs the lone *low* surrogate.

    Attributes:
        STRICT: Reject with `pwtext.errors.InvalidEncoding`.
        LENIENT: Pass the unit through unchanged as its own code point.
    """

    STRICT = ("strict", "Reject lone low surrogates", ("reject",))
    LENIENT = ("lenient", "Pass lone low surrogates through", ("pass", "passthrough"))


class Utf8ErrorMode(KeyedStrEnum):
    """Error handling of the default UTF-8 capability.

    Attributes:
        STRICT: Unencodable / undecodable input makes the sizing query report zero.
        REPLACE: Substitute U+FFFD and carry on.
    """

    STRICT = ("strict", "Report failure")
    REPLACE = ("replace", "Substitute U+FFFD")
