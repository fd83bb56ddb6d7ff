# topmark:header:start
#
#   project      : PwText
#   file         : cmd_common.py
#   file_relpath : src/pwtext/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Helpers shared by PwText CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from pwtext.cli.errors import PwTextUsageError, translate_error
from pwtext.errors import PwTextError

if TYPE_CHECKING:
    from pwtext.cli.console import ClickConsole
    from pwtext.config.model import Config


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context."""
    return ctx.ensure_object(dict)["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the frozen config stored on the root context."""
    return ctx.ensure_object(dict)["config"]


def read_text_arg(text: str) -> str:
    """Return ``text``, or all of stdin when ``text`` is ``"-"``.

    A single trailing newline from stdin is dropped.
    """
    if text != "-":
        return text
    data = click.get_text_stream("stdin").read()
    return data[:-1] if data.endswith("\n") else data


def parse_hex_bytes(value: str) -> bytes:
    """Parse a hex string such as ``"e2 82 ac"`` or ``"e282ac"`` into bytes."""
    cleaned = "".join(value.split())
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise PwTextUsageError(f"Not a hex byte string: {value!r}") from exc


@contextmanager
def library_errors() -> Iterator[None]:
    """Translate `pwtext.errors.PwTextError` into CLI errors with exit codes."""
    try:
        yield
    except PwTextError as exc:
        raise translate_error(exc) from exc

