# topmark:header:start
#
#   project      : PwText
#   file         : backend.py
#   file_relpath : src/pwtext/bridge/backend.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""UTF-8 transcoding capabilities consumed by `pwtext.bridge.utf8`.

The bridge talks to a platform text-encoding service through a two-call
protocol:

- ``measure(src)`` returns the exact destination length, or ``0`` on error;
- ``fill(src, dest, capacity)`` writes at most ``capacity`` items into ``dest``
  and returns the number written.

Asking the same capability for the size that will perform the fill keeps the
two calls consistent without re-deriving UTF-8 rules in the bridge.

The default implementations delegate to Python's ``codecs``. With
``errors="strict"`` a lone surrogate (encode) or malformed UTF-8 (decode) makes
``measure`` report ``0``; with ``errors="replace"`` U+FFFD is substituted.
"""

from __future__ import annotations

from array import array
from typing import TYPE_CHECKING, Protocol

from pwtext.config.logging import get_logger
from pwtext.core.text import UTF16_NATIVE
from pwtext.core.types import Utf8ErrorMode

if TYPE_CHECKING:
    from pwtext.config.logging import PwTextLogger
    from pwtext.core.types import ByteSource, CodeUnits, IntSink

logger: PwTextLogger = get_logger(__name__)


class EncodeCapability(Protocol):
    """UTF-16 code units to UTF-8 bytes."""

    def measure(self, src: CodeUnits) -> int:
        """Return the UTF-8 length of ``src`` in bytes, or 0 on error."""
        ...

    def fill(self, src: CodeUnits, dest: IntSink, capacity: int) -> int:
        """Write the UTF-8 bytes of ``src`` into ``dest``; return the count written."""
        ...


class DecodeCapability(Protocol):
    """UTF-8 bytes to UTF-16 code units."""

    def measure(self, src: ByteSource) -> int:
        """Return the UTF-16 length of ``src`` in code units, or 0 on error."""
        ...

    def fill(self, src: ByteSource, dest: IntSink, capacity: int) -> int:
        """Write the code units of ``src`` into ``dest``; return the count written."""
        ...


def _copy_into(values: bytes | array[int], dest: IntSink, capacity: int) -> int:
    count = min(len(values), capacity)
    for i in range(count):
        dest[i] = values[i]
    return count


class CodecsEncoder:
    """`EncodeCapability` backed by Python's UTF-16 and UTF-8 codecs.

    Attributes:
        errors (Utf8ErrorMode): Handling of lone surrogates in the source.
    """

    def __init__(self, errors: Utf8ErrorMode | str = Utf8ErrorMode.STRICT) -> None:
        self.errors = Utf8ErrorMode(errors)

    def _encode(self, src: CodeUnits) -> bytes | None:
        raw = array("H", src).tobytes()
        try:
            return raw.decode(UTF16_NATIVE, self.errors.value).encode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("UTF-8 encode failed at unit %d: %s", exc.start // 2, exc.reason)
            return None

    def measure(self, src: CodeUnits) -> int:
        """Return the UTF-8 length of ``src``, or 0 if it cannot be encoded."""
        encoded = self._encode(src)
        return 0 if encoded is None else len(encoded)

    def fill(self, src: CodeUnits, dest: IntSink, capacity: int) -> int:
        """Encode ``src`` and copy at most ``capacity`` bytes into ``dest``."""
        encoded = self._encode(src)
        if encoded is None:
            return 0
        return _copy_into(encoded, dest, capacity)


class CodecsDecoder:
    """`DecodeCapability` backed by Python's UTF-8 and UTF-16 codecs.

    Attributes:
        errors (Utf8ErrorMode): Handling of malformed UTF-8 in the source.
    """

    def __init__(self, errors: Utf8ErrorMode | str = Utf8ErrorMode.STRICT) -> None:
        self.errors = Utf8ErrorMode(errors)

    def _decode(self, src: ByteSource) -> array[int] | None:
        try:
            text = str(src, "utf-8", self.errors.value)
        except UnicodeDecodeError as exc:
            logger.debug("UTF-8 decode failed at byte %d: %s", exc.start, exc.reason)
            return None
        units = array("H")
        units.frombytes(text.encode(UTF16_NATIVE, "surrogatepass"))
        return units

    def measure(self, src: ByteSource) -> int:
        """Return the UTF-16 length of ``src``, or 0 if it is not valid UTF-8."""
        decoded = self._decode(src)
        return 0 if decoded is None else len(decoded)

    def fill(self, src: ByteSource, dest: IntSink, capacity: int) -> int:
        """Decode ``src`` and copy at most ``capacity`` code units into ``dest``."""
        decoded = self._decode(src)
        if decoded is None:
            return 0
        return _copy_into(decoded, dest, capacity)
