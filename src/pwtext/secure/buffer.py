# topmark:header:start
#
#   project      : PwText
#   file         : buffer.py
#   file_relpath : src/pwtext/secure/buffer.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Fixed-capacity buffer whose storage is zeroed before release.

A `SecureBuffer` holds code units, code points or bytes (item width 2, 4 or 1)
in a ``bytearray`` obtained from an `pwtext.secure.allocators.Allocator`. The
capacity is chosen at construction, typically from a presizing query; the
logical length is assigned separately with `SecureBuffer.set_length` once the
fill has completed.

Lifecycle:
    - `SecureBuffer.release` zeroes every byte of the storage, then hands it back
      to the allocator. It runs from ``__exit__`` and ``__del__`` as well, so a
      buffer dropped on an error path is wiped too.
    - Duplication is always explicit: `SecureBuffer.copy` (and ``copy.copy`` /
      ``copy.deepcopy``) allocate a new secure buffer. Pickling is refused.
    - ``repr()`` never shows content; equality is constant time.

Exports such as `SecureBuffer.tobytes` or `SecureBuffer.to_str` create ordinary
Python objects that are *not* wiped. Use them only where the secret has to leave
the secure world.

Python gives no guarantee that the interpreter never copied the data elsewhere
(e.g. when a ``str`` was involved upstream); the buffer only controls its own
storage.
"""

from __future__ import annotations

import hmac
from collections.abc import Sized
from typing import TYPE_CHECKING, Final, overload

from pwtext.config.logging import get_logger
from pwtext.core.text import units_to_str
from pwtext.secure.allocators import HeapAllocator

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pwtext.config.logging import PwTextLogger
    from pwtext.secure.allocators import Allocator

logger: PwTextLogger = get_logger(__name__)

# memoryview formats by item width
_FORMATS: Final[dict[int, str]] = {1: "B", 2: "H", 4: "I"}

_DEFAULT_ALLOCATOR: Final[HeapAllocator] = HeapAllocator()


class SecureBuffer:
    """Wipe-on-release buffer of unsigned integers.

    Args:
        capacity (int): Number of items the buffer can hold.
        itemsize (int): Width of one item in bytes: 1 (UTF-8 bytes), 2 (UTF-16
            code units) or 4 (code points).
        allocator (Allocator | None): Storage provider; defaults to a heap allocator.

    Raises:
        ValueError: If ``capacity`` is negative or ``itemsize`` is unsupported.
    """

    __slots__ = (
        "__weakref__",
        "_allocator",
        "_capacity",
        "_itemsize",
        "_length",
        "_raw",
        "_storage",
        "_typed",
    )

    def __init__(
        self,
        capacity: int,
        *,
        itemsize: int = 1,
        allocator: Allocator | None = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if itemsize not in _FORMATS:
            raise ValueError(f"unsupported itemsize {itemsize}; expected one of 1, 2, 4")
        self._allocator: Allocator = allocator or _DEFAULT_ALLOCATOR
        self._capacity = capacity
        self._itemsize = itemsize
        self._length = 0
        self._storage: bytearray | None = self._allocator.allocate(capacity * itemsize)
        self._raw: memoryview | None = memoryview(self._storage)
        self._typed: memoryview | None = self._raw.cast(_FORMATS[itemsize])
        logger.trace("secure buffer allocated: %d x %d bytes", capacity, itemsize)

    @classmethod
    def from_items(
        cls,
        items: Iterable[int],
        *,
        itemsize: int = 1,
        allocator: Allocator | None = None,
    ) -> SecureBuffer:
        """Return a new buffer holding ``items``.

        ``items`` is materialized once to learn its length; pass a sequence to avoid
        an intermediate list.
        """
        values = items if isinstance(items, Sized) else list(items)
        buf = cls(len(values), itemsize=itemsize, allocator=allocator)
        try:
            buf.assign(values)
        except BaseException:
            buf.release()
            raise
        return buf

    # ------------------------------------------------------------------ state

    @property
    def capacity(self) -> int:
        """Number of items the storage can hold."""
        return self._capacity

    @property
    def itemsize(self) -> int:
        """Width of one item in bytes."""
        return self._itemsize

    @property
    def released(self) -> bool:
        """True once the storage has been wiped and handed back."""
        return self._storage is None

    def _checked_typed(self) -> memoryview:
        if self._typed is None:
            raise ValueError("operation on a released SecureBuffer")
        return self._typed

    # ------------------------------------------------------------------ filling

    def writable(self) -> memoryview:
        """Return a writable typed view over the full capacity.

        The view must not outlive the buffer; `release` wipes the storage it
        points to.
        """
        return self._checked_typed()

    def set_length(self, length: int) -> None:
        """Assign the logical length once the true content length is known.

        Items past the new length are zeroed.

        Raises:
            ValueError: If ``length`` is outside ``[0, capacity]``.
        """
        self._checked_typed()
        if not 0 <= length <= self._capacity:
            raise ValueError(f"length {length} outside [0, {self._capacity}]")
        if length < self._length:
            self._zero(length * self._itemsize, self._length * self._itemsize)
        self._length = length

    def assign(self, items: Iterable[int]) -> None:
        """Copy ``items`` into the buffer and set the logical length to their count.

        Raises:
            ValueError: If ``items`` does not fit into the capacity.
        """
        typed = self._checked_typed()
        count = 0
        for value in items:
            if count >= self._capacity:
                self.wipe()
                raise ValueError(f"items exceed capacity {self._capacity}")
            typed[count] = value
            count += 1
        self.set_length(count)

    # ------------------------------------------------------------------ reading

    def view(self) -> memoryview:
        """Return a read-only typed view over the logical content."""
        return self._checked_typed()[: self._length].toreadonly()

    def tolist(self) -> list[int]:
        """Return the logical content as an ordinary (non-secure) list."""
        return self.view().tolist()

    def tobytes(self) -> bytes:
        """Return the logical content as ordinary (non-secure) bytes."""
        return self.view().tobytes()

    def to_str(self) -> str:
        """Return the content as an ordinary (non-secure) ``str``.

        Item width 1 is read as UTF-8, width 2 as UTF-16 code units and width 4
        as code points.
        """
        if self._itemsize == 1:
            return self.tobytes().decode("utf-8", "surrogatepass")
        if self._itemsize == 2:
            return units_to_str(self.view())
        return "".join(map(chr, self.view()))

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        if isinstance(index, slice):
            return self.view()[index].tolist()
        return self.view()[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.view())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecureBuffer):
            return NotImplemented
        if self.released or other.released or self._itemsize != other._itemsize:
            return False
        return hmac.compare_digest(self._content_bytes(), other._content_bytes())

    __hash__ = None  # type: ignore[assignment]

    def _content_bytes(self) -> memoryview:
        assert self._raw is not None
        return self._raw[: self._length * self._itemsize]

    def __repr__(self) -> str:
        if self.released:
            return "SecureBuffer(<released>)"
        return (
            f"SecureBuffer(length={self._length}, capacity={self._capacity}, "
            f"itemsize={self._itemsize})"
        )

    # ------------------------------------------------------------------ duplication

    def copy(self, *, allocator: Allocator | None = None) -> SecureBuffer:
        """Return a new secure buffer with the same content and capacity."""
        typed = self._checked_typed()
        dup = SecureBuffer(
            self._capacity,
            itemsize=self._itemsize,
            allocator=allocator or self._allocator,
        )
        dup.writable()[: self._length] = typed[: self._length]
        dup.set_length(self._length)
        return dup

    def __copy__(self) -> SecureBuffer:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> SecureBuffer:
        return self.copy()

    def __reduce__(self) -> tuple[object, ...]:
        raise TypeError("SecureBuffer cannot be pickled")

    # ------------------------------------------------------------------ wiping

    def _zero(self, start: int, stop: int) -> None:
        if self._raw is not None and stop > start:
            self._raw[start:stop] = bytes(stop - start)

    def wipe(self) -> None:
        """Zero the whole storage and reset the logical length to 0."""
        if self._raw is None:
            return
        self._zero(0, len(self._raw))
        self._length = 0

    def release(self) -> None:
        """Wipe the storage and hand it back to the allocator. Idempotent."""
        storage = self._storage
        if storage is None:
            return
        self.wipe()
        if self._typed is not None:
            self._typed.release()
        if self._raw is not None:
            self._raw.release()
        self._typed = None
        self._raw = None
        self._storage = None
        self._allocator.release(storage)
        logger.trace("secure buffer released: %d bytes wiped", len(storage))

    close = release

    def __enter__(self) -> SecureBuffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        # Attributes may be missing if __init__ failed part-way.
        if getattr(self, "_storage", None) is not None:
            self.release()
