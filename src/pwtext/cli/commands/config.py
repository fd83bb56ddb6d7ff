# topmark:header:start
#
#   project      : PwText
#   file         : config.py
#   file_relpath : src/pwtext/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText `config` command.

Prints the effective configuration as TOML, or the annotated default template.
"""

from __future__ import annotations

import click

from pwtext.cli.cmd_common import get_config, get_console
from pwtext.config.io import load_default_config_template_toml_text


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@click.option(
    "--defaults",
    "show_defaults",
    is_flag=True,
    default=False,
    help="Print the annotated default configuration instead.",
)
@click.pass_context
def config_command(ctx: click.Context, show_defaults: bool) -> None:
    console = get_console(ctx)
    if show_defaults:
        console.print(load_default_config_template_toml_text().rstrip("\n"))
        return

    config = get_config(ctx)
    for path in config.config_files:
        console.print(console.styled(f"# from {path}", dim=True))
    console.print(config.to_toml().rstrip("\n"))
