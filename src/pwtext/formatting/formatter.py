# topmark:header:start
#
#   project      : PwText
#   file         : formatter.py
#   file_relpath : src/pwtext/formatting/formatter.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Growable formatter for ``%``-style templates.

The output size of a template is not known in advance, so the formatter sizes
its buffer through trial rendering:

1. the first attempt uses ``utf16_length(template) * 2 + margin`` code units;
2. if the rendering primitive reports a length that does not fit (``>=``
   capacity), the buffer is re-created with ``length + 1`` units and rendering is
   attempted exactly once more.

A negative status from the primitive is a non-retryable `FormatError`. The
primitive reports the exact required length on truncation, so the second attempt
always fits; if a custom primitive breaks that contract `FormatError` is raised
rather than looping.

The rendering primitive is pluggable (``render=``) and follows the
``vsnprintf`` contract: it writes at most ``capacity - 1`` code units and returns
the full rendered length, or ``-1`` on error.
"""

from __future__ import annotations

from array import array
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from pwtext.config.logging import get_logger
from pwtext.constants import FORMAT_ATTEMPTS, FORMAT_MARGIN
from pwtext.core.text import str_to_units, units_to_str, utf16_length
from pwtext.errors import FormatError
from pwtext.secure.buffer import SecureBuffer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pwtext.config.logging import PwTextLogger
    from pwtext.core.types import IntSink
    from pwtext.secure.allocators import Allocator

logger: PwTextLogger = get_logger(__name__)

RenderPrimitive = Callable[[str, Any, "IntSink", int], int]
"""``(template, values, dest, capacity) -> rendered length or -1``."""


def render_printf(template: str, values: Any, dest: IntSink, capacity: int) -> int:
    """Render ``template % values`` into ``dest`` as UTF-16 code units.

    Writes at most ``capacity - 1`` units, like ``vsnprintf``.

    Returns:
        int: The full rendered length in code units, or ``-1`` if the template
        and values do not match or a value cannot be rendered (e.g. ``%c`` out of
        range, ``%d`` of an infinite float).
    """
    try:
        rendered = template % values
    except (TypeError, ValueError, LookupError, ArithmeticError) as exc:
        logger.debug("render failed for template %r: %s", template, exc)
        return -1
    units = str_to_units(rendered)
    for i in range(min(len(units), max(capacity - 1, 0))):
        dest[i] = units[i]
    return len(units)


def initial_capacity(template: str, margin: int = FORMAT_MARGIN) -> int:
    """Return the first-attempt capacity for ``template`` in code units."""
    return utf16_length(template) * 2 + margin


def _values(args: tuple[Any, ...]) -> Any:
    # A single mapping feeds ``%(name)s`` templates.
    if len(args) == 1 and isinstance(args[0], Mapping):
        return args[0]
    return args


def _render_plain(template: str, values: Any, margin: int, render: RenderPrimitive) -> str:
    if not template:
        return ""
    size = initial_capacity(template, margin)
    for attempt in range(FORMAT_ATTEMPTS):
        buf = array("H", bytes(2 * size))
        n = render(template, values, buf, size)
        if n < 0:
            raise FormatError("Error while formatting string")
        if n < size:
            return units_to_str(buf[:n])
        logger.trace("format attempt %d truncated: need %d, had %d", attempt + 1, n + 1, size)
        size = n + 1
    raise FormatError(f"Formatted text still truncated after {FORMAT_ATTEMPTS} attempts")


def format_text(
    template: str,
    *args: Any,
    margin: int = FORMAT_MARGIN,
    render: RenderPrimitive = render_printf,
) -> str:
    """Return ``template`` rendered with ``args``.

    Example:
        ```python
        assert format_text("%d-%d", 1, 2) == "1-2"
        assert format_text("%(user)s", {"user": "bob"}) == "bob"
        ```

    Raises:
        FormatError: If rendering fails.
    """
    return _render_plain(template, _values(args), margin, render)


def format_text_args(
    template: str,
    arglist: Iterable[Any],
    *,
    margin: int = FORMAT_MARGIN,
    render: RenderPrimitive = render_printf,
) -> str:
    """Render ``template`` with an already-open argument list.

    ``arglist`` is consumed exactly once (an iterator is not restartable); the
    collected values are reused for the retry.
    """
    return _render_plain(template, _values(tuple(arglist)), margin, render)


def format_text_secure(
    template: str,
    *args: Any,
    margin: int = FORMAT_MARGIN,
    render: RenderPrimitive = render_printf,
    allocator: Allocator | None = None,
) -> SecureBuffer:
    """Secure-output variant of `format_text`.

    Returns a `SecureBuffer` of UTF-16 code units. A first-attempt buffer that
    turns out too small is wiped and released before the retry.

    Only the returned buffer is wiped on release. The default primitive renders
    through an ordinary ``str`` and code-unit list first; those copies are left
    to the garbage collector, which Python gives no way to zero.

    Raises:
        FormatError: If rendering fails.
    """
    if not template:
        return SecureBuffer(0, itemsize=2, allocator=allocator)
    values = _values(args)
    size = initial_capacity(template, margin)
    for attempt in range(FORMAT_ATTEMPTS):
        buf = SecureBuffer(size, itemsize=2, allocator=allocator)
        try:
            n = render(template, values, buf.writable(), size)
            if n < 0:
                raise FormatError("Error while formatting string")
            if n < size:
                buf.set_length(n)
                return buf
        except BaseException:
            buf.release()
            raise
        buf.release()
        logger.trace(
            "secure format attempt %d truncated: need %d, had %d", attempt + 1, n + 1, size
        )
        size = n + 1
    raise FormatError(f"Formatted text still truncated after {FORMAT_ATTEMPTS} attempts")
