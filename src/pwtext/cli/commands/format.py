# topmark:header:start
#
#   project      : PwText
#   file         : format.py
#   file_relpath : src/pwtext/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText `format` command.

Renders a ``%``-style template through the growable formatter. Arguments that
look like integers or floats are converted so ``%d`` and ``%f`` work.
"""

from __future__ import annotations

from typing import Any

import click

from pwtext.cli.cmd_common import get_config, get_console, library_errors
from pwtext.formatting.formatter import format_text_args, format_text_secure


def coerce_arg(raw: str) -> Any:
    """Return ``raw`` as an int or float when it parses as one, else unchanged."""
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


@click.command(
    name="format",
    help="Render TEMPLATE ('%'-style) with ARGS.",
)
@click.argument("template")
@click.argument("args", nargs=-1)
@click.option(
    "--secure",
    is_flag=True,
    default=False,
    help="Render into a secure buffer that is wiped after printing.",
)
@click.pass_context
def format_command(ctx: click.Context, template: str, args: tuple[str, ...], secure: bool) -> None:
    """Render TEMPLATE with ARGS."""
    console = get_console(ctx)
    config = get_config(ctx)
    values = [coerce_arg(a) for a in args]

    with library_errors():
        if secure:
            with format_text_secure(
                template, *values, margin=config.format_margin, allocator=config.allocator()
            ) as buf:
                console.print(buf.to_str())
            return
        console.print(format_text_args(template, values, margin=config.format_margin))
