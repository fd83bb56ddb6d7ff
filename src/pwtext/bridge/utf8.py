# topmark:header:start
#
#   project      : PwText
#   file         : utf8.py
#   file_relpath : src/pwtext/bridge/utf8.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Conversions between 16-bit text and UTF-8 bytes.

The byte-level transcoding is delegated to an `EncodeCapability` /
`DecodeCapability` (see `pwtext.bridge.backend`); this module owns the buffer
sizing, the error mapping and the secure-output variants:

1. empty input returns an empty result without calling the capability;
2. ``measure`` sizes the destination; ``0`` is fatal for the call
   (`EncodingError` / `DecodingError`);
3. exactly that many items are allocated and ``fill`` writes them; the logical
   length becomes the number actually written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pwtext.bridge.backend import CodecsDecoder, CodecsEncoder
from pwtext.config.logging import get_logger
from pwtext.core.text import str_to_units
from pwtext.errors import DecodingError, EncodingError
from pwtext.secure.buffer import SecureBuffer

if TYPE_CHECKING:
    from pwtext.bridge.backend import DecodeCapability, EncodeCapability
    from pwtext.config.logging import PwTextLogger
    from pwtext.core.types import ByteSource, CodeUnits, Text
    from pwtext.secure.allocators import Allocator

logger: PwTextLogger = get_logger(__name__)

_DEFAULT_ENCODER = CodecsEncoder()
_DEFAULT_DECODER = CodecsDecoder()


def _units_of(text: Text | SecureBuffer) -> CodeUnits:
    if isinstance(text, str):
        return str_to_units(text)
    if isinstance(text, SecureBuffer):
        if text.itemsize != 2:
            raise TypeError(
                "expected a SecureBuffer of UTF-16 code units (itemsize 2), "
                f"got itemsize {text.itemsize}"
            )
        return text.view()
    return text


def _bytes_of(data: ByteSource | SecureBuffer) -> ByteSource:
    if isinstance(data, SecureBuffer):
        if data.itemsize != 1:
            raise TypeError(
                "expected a SecureBuffer of UTF-8 bytes (itemsize 1), "
                f"got itemsize {data.itemsize}"
            )
        return data.view()
    return data


def _measure_utf8(encoder: EncodeCapability, units: CodeUnits) -> int:
    size = encoder.measure(units)
    if size <= 0:
        raise EncodingError("Error while converting string to UTF-8")
    logger.trace("UTF-8 encode: %d code units -> %d bytes", len(units), size)
    return size


def _measure_units(decoder: DecodeCapability, data: ByteSource) -> int:
    size = decoder.measure(data)
    if size <= 0:
        raise DecodingError("Error while decoding UTF-8 string")
    logger.trace("UTF-8 decode: %d bytes -> %d code units", len(data), size)
    return size


def text_to_utf8(
    text: Text | SecureBuffer,
    *,
    encoder: EncodeCapability | None = None,
) -> bytes:
    """Encode 16-bit text as UTF-8.

    Args:
        text (Text | SecureBuffer): A ``str``, a code-unit sequence or a secure
            buffer of code units.
        encoder (EncodeCapability | None): Transcoding capability; defaults to
            a strict `CodecsEncoder`.

    Returns:
        bytes: The UTF-8 encoding (empty for empty input).

    Raises:
        EncodingError: If the capability cannot size or fill the destination.
        TypeError: If ``text`` is a `SecureBuffer` not holding code units.
    """
    units = _units_of(text)
    if not units:
        return b""
    encoder = encoder or _DEFAULT_ENCODER
    size = _measure_utf8(encoder, units)
    dest = bytearray(size)
    written = encoder.fill(units, dest, size)
    if written <= 0:
        raise EncodingError("Error while converting string to UTF-8")
    return bytes(dest[:written])


def text_to_utf8_secure(
    text: Text | SecureBuffer,
    *,
    encoder: EncodeCapability | None = None,
    allocator: Allocator | None = None,
) -> SecureBuffer:
    """Secure-output variant of `text_to_utf8` (item width 1).

    Only the returned buffer is wiped on release. `CodecsEncoder` builds
    ordinary ``bytes`` and ``str`` copies of the text while measuring and
    filling; Python gives no way to zero those, so supply a capability that
    writes straight into ``dest`` when that matters.
    """
    units = _units_of(text)
    if not units:
        return SecureBuffer(0, itemsize=1, allocator=allocator)
    encoder = encoder or _DEFAULT_ENCODER
    size = _measure_utf8(encoder, units)
    buf = SecureBuffer(size, itemsize=1, allocator=allocator)
    try:
        written = encoder.fill(units, buf.writable(), size)
        if written <= 0:
            raise EncodingError("Error while converting string to UTF-8")
        buf.set_length(written)
    except BaseException:
        buf.release()
        raise
    return buf


def utf8_to_text(
    data: ByteSource | SecureBuffer,
    *,
    decoder: DecodeCapability | None = None,
) -> list[int]:
    """Decode UTF-8 bytes into UTF-16 code units.

    Use `pwtext.core.text.units_to_str` to obtain a ``str``.

    Args:
        data (ByteSource | SecureBuffer): UTF-8 bytes.
        decoder (DecodeCapability | None): Transcoding capability; defaults to
            a strict `CodecsDecoder`.

    Returns:
        list[int]: The code units (empty for empty input).

    Raises:
        DecodingError: If the capability cannot size or fill the destination.
        TypeError: If ``data`` is a `SecureBuffer` not holding bytes.
    """
    src = _bytes_of(data)
    if not len(src):
        return []
    decoder = decoder or _DEFAULT_DECODER
    size = _measure_units(decoder, src)
    dest = [0] * size
    written = decoder.fill(src, dest, size)
    if written <= 0:
        raise DecodingError("Error while decoding UTF-8 string")
    return dest[:written]


def utf8_to_text_secure(
    data: ByteSource | SecureBuffer,
    *,
    decoder: DecodeCapability | None = None,
    allocator: Allocator | None = None,
) -> SecureBuffer:
    """Secure-output variant of `utf8_to_text` (item width 2)."""
    src = _bytes_of(data)
    if not len(src):
        return SecureBuffer(0, itemsize=2, allocator=allocator)
    decoder = decoder or _DEFAULT_DECODER
    size = _measure_units(decoder, src)
    buf = SecureBuffer(size, itemsize=2, allocator=allocator)
    try:
        written = decoder.fill(src, buf.writable(), size)
        if written <= 0:
            raise DecodingError("Error while decoding UTF-8 string")
        buf.set_length(written)
    except BaseException:
        buf.release()
        raise
    return buf
