# topmark:header:start
#
#   project      : PwText
#   file         : surrogates.py
#   file_relpath : src/pwtext/core/surrogates.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Surrogate codec between UTF-16 code units and 32-bit code points.

The writers in this module fill a caller-provided, pre-sized `IntSink` and return
the number of items written. They own no allocation policy: callers presize the
destination with `pwtext.core.counting` and pick a plain or secure buffer (see
`pwtext.transcode`).

Surrogate pairs are combined into their true scalar value, so ``0xD83D 0xDE00``
decodes to ``0x1F600`` and `encode_code_points_to_units` restores the exact pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pwtext.config.logging import get_logger
from pwtext.constants import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_BMP,
    MAX_CODE_POINT,
    SUPPLEMENTARY_BASE,
)
from pwtext.core.types import SurrogatePolicy
from pwtext.errors import InvalidEncoding

if TYPE_CHECKING:
    from pwtext.config.logging import PwTextLogger
    from pwtext.core.types import ByteSource, CodePoints, CodeUnits, IntSink

logger: PwTextLogger = get_logger(__name__)


def is_high_surrogate(unit: int) -> bool:
    """Return True if ``unit`` lies in ``[0xD800, 0xDBFF]``."""
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    """Return True if ``unit`` lies in ``[0xDC00, 0xDFFF]``."""
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def combine_surrogates(high: int, low: int) -> int:
    """Return the supplementary code point encoded by a high/low surrogate pair."""
    return SUPPLEMENTARY_BASE + ((high - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)


def split_code_point(code_point: int) -> tuple[int, int]:
    """Return the ``(high, low)`` surrogate pair for a supplementary code point.

    Inverse of `combine_surrogates` for values in ``[0x10000, 0x10FFFF]``.
    """
    offset = code_point - SUPPLEMENTARY_BASE
    return HIGH_SURROGATE_MIN + (offset >> 10), LOW_SURROGATE_MIN + (offset & 0x3FF)


def decode_units_to_code_points(
    units: CodeUnits,
    out: IntSink,
    *,
    policy: SurrogatePolicy = SurrogatePolicy.STRICT,
) -> int:
    """Decode UTF-16 code units into code points.

    Each high surrogate must be immediately followed by a low surrogate; the pair
    is written as one code point. Every other unit is written unchanged, except a
    lone low surrogate under `SurrogatePolicy.STRICT`.

    Strict is the default. `SurrogatePolicy.LENIENT` keeps the older pass-through
    behavior, where a lone low surrogate is copied as its own code point.

    Args:
        units (CodeUnits): Source code units.
        out (IntSink): Destination with room for ``count_code_points(units)`` items.
        policy (SurrogatePolicy): Handling of a low surrogate with no preceding
            high surrogate.

    Returns:
        int: Number of code points written to ``out``.

    Raises:
        InvalidEncoding: On an unpaired high surrogate, or a lone low surrogate
            under the strict policy.
    """
    n = len(units)
    i = 0
    written = 0
    while i < n:
        unit = units[i]
        if is_high_surrogate(unit):
            low = units[i + 1] if i + 1 < n else None
            if low is None or not is_low_surrogate(low):
                logger.debug("unpaired high surrogate 0x%04X at index %d", unit, i)
                raise InvalidEncoding(
                    f"Invalid UTF-16 character encoding: unpaired high surrogate "
                    f"0x{unit:04X} at index {i}",
                    index=i,
                    value=unit,
                )
            out[written] = combine_surrogates(unit, low)
            i += 2
        else:
            if policy is SurrogatePolicy.STRICT and is_low_surrogate(unit):
                logger.debug("lone low surrogate 0x%04X at index %d", unit, i)
                raise InvalidEncoding(
                    f"Invalid UTF-16 character encoding: lone low surrogate "
                    f"0x{unit:04X} at index {i}",
                    index=i,
                    value=unit,
                )
            out[written] = unit
            i += 1
        written += 1
    return written


def encode_code_points_to_units(code_points: CodePoints, out: IntSink) -> int:
    """Encode code points as UTF-16 code units.

    Values up to ``0xFFFF`` are written as one unit, larger values as a surrogate
    pair (high unit first).

    Args:
        code_points (CodePoints): Source code points.
        out (IntSink): Destination with room for ``count_utf16_units_needed(code_points)``
            items.

    Returns:
        int: Number of code units written to ``out``.

    Raises:
        InvalidEncoding: If a value is negative or above ``0x10FFFF``.
    """
    written = 0
    for index, cp in enumerate(code_points):
        if 0 <= cp <= MAX_BMP:
            out[written] = cp
            written += 1
        elif MAX_BMP < cp <= MAX_CODE_POINT:
            high, low = split_code_point(cp)
            out[written] = high
            out[written + 1] = low
            written += 2
        else:
            raise InvalidEncoding(
                f"Code point 0x{cp:X} at index {index} has no UTF-16 form",
                index=index,
                value=cp,
            )
    return written


def encode_ascii_to_code_points(src: ByteSource, out: IntSink) -> int:
    """Widen a single-byte source to one code point per byte.

    Returns:
        int: Number of code points written (one per source byte).
    """
    raw = memoryview(src).cast("B")
    for i, byte in enumerate(raw):
        out[i] = byte
    return len(raw)
