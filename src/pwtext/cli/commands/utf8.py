# topmark:header:start
#
#   project      : PwText
#   file         : utf8.py
#   file_relpath : src/pwtext/cli/commands/utf8.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText `encode` and `decode` commands (UTF-8 bridge)."""

from __future__ import annotations

import click

from pwtext.bridge.utf8 import (
    text_to_utf8,
    text_to_utf8_secure,
    utf8_to_text,
    utf8_to_text_secure,
)
from pwtext.cli.cmd_common import (
    get_config,
    get_console,
    library_errors,
    parse_hex_bytes,
    read_text_arg,
)
from pwtext.core.text import str_to_units, units_to_str


@click.command(
    name="encode",
    help="Encode TEXT as UTF-8 and print the bytes in hex.",
)
@click.argument("text")
@click.option(
    "--secure",
    is_flag=True,
    default=False,
    help="Convert through a secure buffer that is wiped after printing.",
)
@click.pass_context
def encode_command(ctx: click.Context, text: str, secure: bool) -> None:
    """Encode TEXT as UTF-8."""
    console = get_console(ctx)
    config = get_config(ctx)
    units = str_to_units(read_text_arg(text))

    with library_errors():
        if secure:
            with text_to_utf8_secure(
                units, encoder=config.encoder(), allocator=config.allocator()
            ) as buf:
                console.print(buf.view().hex(" "))
            return
        console.print(text_to_utf8(units, encoder=config.encoder()).hex(" "))


@click.command(
    name="decode",
    help="Decode UTF-8 bytes given in hex (e.g. 'e2 82 ac') and print the text.",
)
@click.argument("hex_bytes", metavar="HEX")
@click.option(
    "--secure",
    is_flag=True,
    default=False,
    help="Convert through a secure buffer that is wiped after printing.",
)
@click.pass_context
def decode_command(ctx: click.Context, hex_bytes: str, secure: bool) -> None:
    """Decode hex-encoded UTF-8 bytes."""
    console = get_console(ctx)
    config = get_config(ctx)
    data = parse_hex_bytes(read_text_arg(hex_bytes))

    with library_errors():
        if secure:
            with utf8_to_text_secure(
                data, decoder=config.decoder(), allocator=config.allocator()
            ) as buf:
                console.print(buf.to_str())
            return
        console.print(units_to_str(utf8_to_text(data, decoder=config.decoder())))
