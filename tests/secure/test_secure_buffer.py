# topmark:header:start
#
#   project      : PwText
#   file         : test_secure_buffer.py
#   file_relpath : tests/secure/test_secure_buffer.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Tests for `pwtext.secure.buffer.SecureBuffer`.

A `RecordingAllocator` keeps a reference to every storage block so the tests can
check that content is zeroed once a buffer is released.
"""

from __future__ import annotations

import copy
import gc
import pickle

import pytest

from pwtext.secure.buffer import SecureBuffer
from tests.conftest import RecordingAllocator, parametrize


def test_new_buffer_is_empty_and_zeroed(recording_allocator: RecordingAllocator) -> None:
    buf = SecureBuffer(4, itemsize=2, allocator=recording_allocator)
    assert len(buf) == 0
    assert buf.capacity == 4
    assert buf.itemsize == 2
    assert recording_allocator.allocated == [bytearray(8)]
    buf.release()


@parametrize("itemsize, top", [(1, 0xFF), (2, 0xFFFF), (4, 0x10FFFF)])
def test_item_widths(itemsize: int, top: int) -> None:
    with SecureBuffer.from_items([0, top], itemsize=itemsize) as buf:
        assert buf.tolist() == [0, top]
        assert len(buf.tobytes()) == 2 * itemsize


def test_invalid_construction() -> None:
    with pytest.raises(ValueError):
        SecureBuffer(-1)
    with pytest.raises(ValueError):
        SecureBuffer(1, itemsize=3)


def test_release_wipes_storage(recording_allocator: RecordingAllocator) -> None:
    buf = SecureBuffer.from_items(b"secret", allocator=recording_allocator)
    storage = recording_allocator.allocated[0]
    assert bytes(storage) == b"secret"

    buf.release()
    assert buf.released
    assert bytes(storage) == bytes(6)
    assert recording_allocator.released == [storage]

    # idempotent
    buf.release()
    assert len(recording_allocator.released) == 1


def test_context_exit_wipes_on_error(recording_allocator: RecordingAllocator) -> None:
    with pytest.raises(RuntimeError):
        with SecureBuffer.from_items([1, 2, 3], itemsize=4, allocator=recording_allocator):
            raise RuntimeError("boom")
    assert not any(recording_allocator.allocated[0])


def test_dropping_last_reference_wipes(recording_allocator: RecordingAllocator) -> None:
    buf = SecureBuffer.from_items(b"pw", allocator=recording_allocator)
    storage = recording_allocator.allocated[0]
    del buf
    gc.collect()
    assert bytes(storage) == b"\x00\x00"
    assert recording_allocator.released == [storage]


def test_set_length_zeroes_tail(recording_allocator: RecordingAllocator) -> None:
    buf = SecureBuffer.from_items(b"abcd", allocator=recording_allocator)
    buf.set_length(2)
    assert buf.tobytes() == b"ab"
    assert bytes(recording_allocator.allocated[0]) == b"ab\x00\x00"
    with pytest.raises(ValueError):
        buf.set_length(5)
    buf.release()


def test_assign_overflow_wipes() -> None:
    buf = SecureBuffer(2)
    with pytest.raises(ValueError):
        buf.assign(b"abc")
    assert len(buf) == 0
    buf.release()


def test_operations_after_release_fail() -> None:
    buf = SecureBuffer.from_items(b"x")
    buf.release()
    with pytest.raises(ValueError):
        buf.view()
    with pytest.raises(ValueError):
        buf.writable()
    assert repr(buf) == "SecureBuffer(<released>)"


def test_repr_hides_content() -> None:
    with SecureBuffer.from_items(b"hunter2") as buf:
        assert "hunter2" not in repr(buf)
        assert "length=7" in repr(buf)


def test_copy_is_explicit_and_independent(recording_allocator: RecordingAllocator) -> None:
    with SecureBuffer.from_items([0x41, 0x42], itemsize=2, allocator=recording_allocator) as a:
        with a.copy() as b:
            assert a == b
            assert b.capacity == a.capacity
            b.writable()[0] = 0x5A
            assert a != b
        with copy.deepcopy(a) as c:
            assert c == a
    assert len(recording_allocator.allocated) == 3
    assert all(not any(s) for s in recording_allocator.allocated)


def test_equality_rules() -> None:
    with (
        SecureBuffer.from_items(b"ab") as a,
        SecureBuffer.from_items(b"ab") as b,
        SecureBuffer.from_items([0x61, 0x62], itemsize=2) as wide,
    ):
        assert a == b
        assert a != wide
        assert (a == b"ab") is False
    with pytest.raises(TypeError):
        hash(SecureBuffer(0))


def test_pickling_is_refused() -> None:
    with SecureBuffer.from_items(b"pw") as buf:
        with pytest.raises(TypeError):
            pickle.dumps(buf)


def test_to_str_per_width() -> None:
    with SecureBuffer.from_items("€".encode()) as b1:
        assert b1.to_str() == "€"
    with SecureBuffer.from_items([0xD83D, 0xDE00], itemsize=2) as b2:
        assert b2.to_str() == "\U0001F600"
    with SecureBuffer.from_items([0x1F600], itemsize=4) as b4:
        assert b4.to_str() == "\U0001F600"


def test_sequence_access() -> None:
    with SecureBuffer.from_items([1, 2, 3], itemsize=4) as buf:
        assert buf[0] == 1
        assert buf[-1] == 3
        assert buf[1:] == [2, 3]
        assert list(buf) == [1, 2, 3]
        with pytest.raises(TypeError):
            buf.view()[0] = 9  # type: ignore[index]
