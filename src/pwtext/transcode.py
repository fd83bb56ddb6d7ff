# topmark:header:start
#
#   project      : PwText
#   file         : transcode.py
#   file_relpath : src/pwtext/transcode.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Owned conversions between UTF-16 code units, code points and ASCII.

Each conversion presizes its output with `pwtext.core.counting`, then runs the
codec from `pwtext.core.surrogates` into either an ordinary list or a
`pwtext.secure.SecureBuffer`. Empty input always yields an empty result.

Secure variants wipe and release a partially filled buffer before the error
propagates, so a failed conversion leaves no secret-bearing storage behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pwtext.config.logging import get_logger
from pwtext.core.counting import count_code_points, count_utf16_units_needed
from pwtext.core.surrogates import (
    decode_units_to_code_points,
    encode_ascii_to_code_points,
    encode_code_points_to_units,
)
from pwtext.core.types import SurrogatePolicy
from pwtext.secure.buffer import SecureBuffer

if TYPE_CHECKING:
    from collections.abc import Callable

    from pwtext.config.logging import PwTextLogger
    from pwtext.core.types import ByteSource, CodePoints, CodeUnits, IntSink
    from pwtext.secure.allocators import Allocator

logger: PwTextLogger = get_logger(__name__)

UNIT_ITEMSIZE = 2
CODE_POINT_ITEMSIZE = 4


def _fill_secure(
    capacity: int,
    itemsize: int,
    allocator: Allocator | None,
    fill: Callable[[IntSink], int],
) -> SecureBuffer:
    buf = SecureBuffer(capacity, itemsize=itemsize, allocator=allocator)
    try:
        buf.set_length(fill(buf.writable()))
    except BaseException:
        buf.release()
        raise
    return buf


def _as_bytes(src: ByteSource | str) -> ByteSource:
    return src.encode("ascii") if isinstance(src, str) else src


def units_to_code_points(
    units: CodeUnits,
    *,
    policy: SurrogatePolicy = SurrogatePolicy.STRICT,
) -> list[int]:
    """Decode UTF-16 code units into a list of code points.

    Raises:
        InvalidEncoding: On a malformed surrogate (see
            `pwtext.core.surrogates.decode_units_to_code_points`).
    """
    if not units:
        return []
    out = [0] * count_code_points(units)
    written = decode_units_to_code_points(units, out, policy=policy)
    logger.trace("decoded %d code units into %d code points", len(units), written)
    return out[:written]


def units_to_code_points_secure(
    units: CodeUnits,
    *,
    policy: SurrogatePolicy = SurrogatePolicy.STRICT,
    allocator: Allocator | None = None,
) -> SecureBuffer:
    """Secure-output variant of `units_to_code_points` (item width 4)."""
    if not units:
        return SecureBuffer(0, itemsize=CODE_POINT_ITEMSIZE, allocator=allocator)
    return _fill_secure(
        count_code_points(units),
        CODE_POINT_ITEMSIZE,
        allocator,
        lambda out: decode_units_to_code_points(units, out, policy=policy),
    )


def code_points_to_units(code_points: CodePoints) -> list[int]:
    """Encode code points into a list of UTF-16 code units.

    Raises:
        InvalidEncoding: If a value has no UTF-16 form.
    """
    if not code_points:
        return []
    out = [0] * count_utf16_units_needed(code_points)
    written = encode_code_points_to_units(code_points, out)
    logger.trace("encoded %d code points into %d code units", len(code_points), written)
    return out


def code_points_to_units_secure(
    code_points: CodePoints,
    *,
    allocator: Allocator | None = None,
) -> SecureBuffer:
    """Secure-output variant of `code_points_to_units` (item width 2)."""
    if not code_points:
        return SecureBuffer(0, itemsize=UNIT_ITEMSIZE, allocator=allocator)
    return _fill_secure(
        count_utf16_units_needed(code_points),
        UNIT_ITEMSIZE,
        allocator,
        lambda out: encode_code_points_to_units(code_points, out),
    )


def ascii_to_code_points(src: ByteSource | str) -> list[int]:
    """Widen a single-byte source into a list of code points.

    A ``str`` source must be pure ASCII (``UnicodeEncodeError`` otherwise).
    """
    data = _as_bytes(src)
    if not data:
        return []
    out = [0] * len(data)
    encode_ascii_to_code_points(data, out)
    return out


def ascii_to_code_points_secure(
    src: ByteSource | str,
    *,
    allocator: Allocator | None = None,
) -> SecureBuffer:
    """Secure-output variant of `ascii_to_code_points` (item width 4)."""
    data = _as_bytes(src)
    return _fill_secure(
        len(data),
        CODE_POINT_ITEMSIZE,
        allocator,
        lambda out: encode_ascii_to_code_points(data, out),
    )
