# topmark:header:start
#
#   project      : PwText
#   file         : counting.py
#   file_relpath : src/pwtext/core/counting.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Code-point counting for presizing conversion buffers.

These are fast presizing passes, not validators: `count_code_points` trusts that a
high surrogate is followed by its low partner. Validation happens in
`pwtext.core.surrogates.decode_units_to_code_points`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pwtext.constants import HIGH_SURROGATE_MAX, HIGH_SURROGATE_MIN, MAX_BMP

if TYPE_CHECKING:
    from pwtext.core.types import CodePoints, CodeUnits


def count_code_points(units: CodeUnits) -> int:
    """Return the number of code points represented by UTF-16 ``units``.

    A high surrogate consumes itself and the following unit; every other unit
    counts as one code point. A trailing high surrogate counts as one.
    """
    n = len(units)
    count = 0
    i = 0
    while i < n:
        if HIGH_SURROGATE_MIN <= units[i] <= HIGH_SURROGATE_MAX:
            i += 1
        i += 1
        count += 1
    return count


def count_utf16_units_needed(code_points: CodePoints) -> int:
    """Return the number of UTF-16 code units needed to encode ``code_points``."""
    return sum(2 if cp > MAX_BMP else 1 for cp in code_points)


def count_utf8_bytes_needed(code_points: CodePoints) -> int:
    """Return the UTF-8 length in bytes of ``code_points``.

    Surrogate values in the sequence (lone units passed through leniently) are
    counted with their 3-byte generalized form.
    """
    total = 0
    for cp in code_points:
        if cp < 0x80:
            total += 1
        elif cp < 0x800:
            total += 2
        elif cp <= MAX_BMP:
            total += 3
        else:
            total += 4
    return total
