# topmark:header:start
#
#   project      : PwText
#   file         : errors.py
#   file_relpath : src/pwtext/errors.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Exceptions raised by the PwText conversion layer.

Every fallible operation raises one of the four conversion errors below. They
are raised at the point of detection and propagate to the caller unmodified;
no partial output is returned on failure.

The CLI maps these onto `click` exceptions with sysexits-aligned exit codes
(see `pwtext.cli.errors`).
"""

from __future__ import annotations


class PwTextError(ValueError):
    """Base class for all PwText errors."""


class InvalidEncoding(PwTextError):
    """Malformed UTF-16 input, or a code point that has no UTF-16 form.

    Attributes:
        index (int | None): Offset of the offending item in the source sequence.
        value (int | None): The offending code unit or code point.
    """

    def __init__(self, message: str, *, index: int | None = None, value: int | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


class EncodingError(PwTextError):
    """The UTF-8 encode capability could not size or fill the destination."""


class DecodingError(PwTextError):
    """The UTF-8 decode capability could not size or fill the destination."""


class FormatError(PwTextError):
    """The rendering primitive failed, or the resized buffer still did not fit."""


class ConfigError(PwTextError):
    """Invalid PwText configuration (unknown value or malformed TOML)."""
