# topmark:header:start
#
#   project      : PwText
#   file         : allocators.py
#   file_relpath : src/pwtext/secure/allocators.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Storage allocators for `pwtext.secure.SecureBuffer`.

An allocator hands out zero-initialized ``bytearray`` storage and takes it back
once the owning buffer has wiped it. `SecureBuffer` always zeroes the storage
*before* calling `Allocator.release`, so allocators never see secret content on
release.

`LockedAllocator` additionally asks the operating system to keep the pages
resident (``mlock`` / ``VirtualLock``) so secrets are not written to swap. This
is best effort: when the platform refuses (e.g. ``RLIMIT_MEMLOCK`` exhausted)
the storage is still handed out and the refusal is logged.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import sys
from typing import TYPE_CHECKING, Protocol

from pwtext.config.logging import get_logger

if TYPE_CHECKING:
    from pwtext.config.logging import PwTextLogger

logger: PwTextLogger = get_logger(__name__)


class Allocator(Protocol):
    """Source of backing storage for secure buffers."""

    def allocate(self, nbytes: int) -> bytearray:
        """Return zero-initialized storage of exactly ``nbytes`` bytes."""
        ...

    def release(self, storage: bytearray) -> None:
        """Take back storage that has already been wiped."""
        ...


class HeapAllocator:
    """Plain ``bytearray`` storage on the Python heap."""

    def allocate(self, nbytes: int) -> bytearray:
        """Return a new zero-filled ``bytearray``."""
        return bytearray(nbytes)

    def release(self, storage: bytearray) -> None:
        """Nothing to undo for heap storage."""


def _address_of(storage: bytearray) -> int:
    return ctypes.addressof((ctypes.c_char * len(storage)).from_buffer(storage))


class LockedAllocator(HeapAllocator):
    """Heap storage whose pages are locked in physical memory.

    Only storage whose lock succeeded is unlocked on release; `locked` counts
    those allocations.
    """

    def __init__(self) -> None:
        # ids stay unique while the owning buffer still holds the storage
        self._locked_ids: set[int] = set()
        self._libc: ctypes.CDLL | None = None
        if sys.platform != "win32":
            libc_name = ctypes.util.find_library("c")
            self._libc = ctypes.CDLL(libc_name, use_errno=True) if libc_name else None

    def _lock(self, address: int, nbytes: int) -> bool:
        if sys.platform == "win32":
            kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            return bool(kernel32.VirtualLock(ctypes.c_void_p(address), nbytes))
        if self._libc is None:
            return False
        return self._libc.mlock(ctypes.c_void_p(address), ctypes.c_size_t(nbytes)) == 0

    def _unlock(self, address: int, nbytes: int) -> bool:
        if sys.platform == "win32":
            kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            return bool(kernel32.VirtualUnlock(ctypes.c_void_p(address), nbytes))
        if self._libc is None:
            return False
        return self._libc.munlock(ctypes.c_void_p(address), ctypes.c_size_t(nbytes)) == 0

    @property
    def locked(self) -> int:
        """Number of live allocations whose pages are locked."""
        return len(self._locked_ids)

    def allocate(self, nbytes: int) -> bytearray:
        """Return zero-filled storage, locked in memory when the platform allows it."""
        storage = bytearray(nbytes)
        if nbytes == 0:
            return storage
        if self._lock(_address_of(storage), nbytes):
            self._locked_ids.add(id(storage))
            logger.trace("locked %d bytes", nbytes)
        else:
            logger.debug("could not lock %d bytes (errno %d)", nbytes, ctypes.get_errno())
        return storage

    def release(self, storage: bytearray) -> None:
        """Unlock the pages of ``storage`` (already wiped by its owner)."""
        if id(storage) not in self._locked_ids:
            return
        self._locked_ids.discard(id(storage))
        if self._unlock(_address_of(storage), len(storage)):
            logger.trace("unlocked %d bytes", len(storage))
        else:
            logger.debug("could not unlock %d bytes (errno %d)", len(storage), ctypes.get_errno())
