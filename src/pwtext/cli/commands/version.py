# topmark:header:start
#
#   project      : PwText
#   file         : version.py
#   file_relpath : src/pwtext/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText `version` command.

Prints the current PwText version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from pwtext.cli.cmd_common import get_console
from pwtext.constants import PWTEXT_VERSION


@click.command(
    name="version",
    help="Show the current version of PwText.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of PwText."""
    console = get_console(ctx)
    console.print(console.styled(PWTEXT_VERSION, bold=True))
