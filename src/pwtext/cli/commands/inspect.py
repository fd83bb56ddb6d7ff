# topmark:header:start
#
#   project      : PwText
#   file         : inspect.py
#   file_relpath : src/pwtext/cli/commands/inspect.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText `count`, `codepoints` and `units` commands.

These commands show how a piece of text is laid out in each representation.
TEXT may be ``-`` to read from stdin.
"""

from __future__ import annotations

import click

from pwtext.bridge.utf8 import text_to_utf8
from pwtext.cli.cmd_common import get_config, get_console, library_errors, read_text_arg
from pwtext.core.counting import count_code_points
from pwtext.core.text import str_to_units
from pwtext.transcode import units_to_code_points


@click.command(
    name="count",
    help="Count code units, code points and UTF-8 bytes of TEXT.",
)
@click.argument("text")
@click.pass_context
def count_command(ctx: click.Context, text: str) -> None:
    """Count code units, code points and UTF-8 bytes of TEXT."""
    console = get_console(ctx)
    config = get_config(ctx)
    units = str_to_units(read_text_arg(text))

    with library_errors():
        # Decoding validates the surrogate structure before anything is reported.
        units_to_code_points(units, policy=config.surrogate_policy)
        utf8 = text_to_utf8(units, encoder=config.encoder())

    console.print(f"code units:  {len(units)}")
    console.print(f"code points: {count_code_points(units)}")
    console.print(f"utf-8 bytes: {len(utf8)}")


@click.command(
    name="codepoints",
    help="List the code points of TEXT as U+XXXX.",
)
@click.argument("text")
@click.pass_context
def codepoints_command(ctx: click.Context, text: str) -> None:
    """List the code points of TEXT."""
    console = get_console(ctx)
    config = get_config(ctx)
    units = str_to_units(read_text_arg(text))

    with library_errors():
        code_points = units_to_code_points(units, policy=config.surrogate_policy)

    console.print(" ".join(f"U+{cp:04X}" for cp in code_points))


@click.command(
    name="units",
    help="List the UTF-16 code units of TEXT in hex.",
)
@click.argument("text")
@click.pass_context
def units_command(ctx: click.Context, text: str) -> None:
    """List the UTF-16 code units of TEXT."""
    console = get_console(ctx)
    units = str_to_units(read_text_arg(text))
    console.print(" ".join(f"{u:04X}" for u in units))
