# topmark:header:start
#
#   project      : PwText
#   file         : test_surrogates.py
#   file_relpath : tests/core/test_surrogates.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Tests for the surrogate codec writers in `pwtext.core.surrogates`."""

from __future__ import annotations

import pytest
from hypothesis import given

from pwtext.core.surrogates import (
    combine_surrogates,
    decode_units_to_code_points,
    encode_ascii_to_code_points,
    encode_code_points_to_units,
    is_high_surrogate,
    is_low_surrogate,
    split_code_point,
)
from pwtext.core.types import SurrogatePolicy
from pwtext.errors import InvalidEncoding
from tests.conftest import parametrize
from tests.strategies_pwtext import supplementary_values


@parametrize(
    "unit, high, low",
    [
        (0xD7FF, False, False),
        (0xD800, True, False),
        (0xDBFF, True, False),
        (0xDC00, False, True),
        (0xDFFF, False, True),
        (0xE000, False, False),
    ],
)
def test_surrogate_ranges(unit: int, high: bool, low: bool) -> None:
    assert is_high_surrogate(unit) is high
    assert is_low_surrogate(unit) is low


def test_combine_known_pair() -> None:
    assert combine_surrogates(0xD83D, 0xDE00) == 0x1F600
    assert split_code_point(0x1F600) == (0xD83D, 0xDE00)


@given(supplementary_values)
def test_split_then_combine_is_identity(cp: int) -> None:
    high, low = split_code_point(cp)
    assert is_high_surrogate(high)
    assert is_low_surrogate(low)
    assert combine_surrogates(high, low) == cp


def test_decode_writes_pairs_as_one_value() -> None:
    out = [0] * 3
    n = decode_units_to_code_points([0x41, 0xD83D, 0xDE00, 0x42], out)
    assert n == 3
    assert out == [0x41, 0x1F600, 0x42]


@parametrize(
    "units, index",
    [
        ([0xD800], 0),
        ([0x41, 0xD800, 0x42], 1),
        ([0xD800, 0xD800, 0xDC00], 0),
    ],
)
def test_decode_rejects_unpaired_high(units: list[int], index: int) -> None:
    with pytest.raises(InvalidEncoding) as excinfo:
        decode_units_to_code_points(units, [0] * len(units))
    assert excinfo.value.index == index
    assert excinfo.value.value == units[index]


def test_decode_rejects_unpaired_high_even_when_lenient() -> None:
    with pytest.raises(InvalidEncoding):
        decode_units_to_code_points([0xDBFF, 0x41], [0, 0], policy=SurrogatePolicy.LENIENT)


def test_decode_lone_low_follows_policy() -> None:
    units = [0x41, 0xDC00]
    with pytest.raises(InvalidEncoding) as excinfo:
        decode_units_to_code_points(units, [0, 0])
    assert excinfo.value.index == 1

    out = [0, 0]
    assert decode_units_to_code_points(units, out, policy=SurrogatePolicy.LENIENT) == 2
    assert out == [0x41, 0xDC00]


def test_encode_splits_supplementary() -> None:
    out = [0] * 4
    assert encode_code_points_to_units([0x41, 0x1F600, 0xFFFF], out) == 4
    assert out == [0x41, 0xD83D, 0xDE00, 0xFFFF]


@parametrize("bad", [-1, 0x110000, 0x7FFFFFFF])
def test_encode_rejects_values_without_utf16_form(bad: int) -> None:
    with pytest.raises(InvalidEncoding) as excinfo:
        encode_code_points_to_units([0x41, bad], [0] * 4)
    assert excinfo.value.index == 1
    assert excinfo.value.value == bad


def test_ascii_widening_keeps_byte_values() -> None:
    out = [0] * 4
    assert encode_ascii_to_code_points(b"A\x00\x7f\xff", out) == 4
    assert out == [0x41, 0x00, 0x7F, 0xFF]
