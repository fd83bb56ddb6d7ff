# topmark:header:start
#
#   project      : PwText
#   file         : main.py
#   file_relpath : src/pwtext/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""PwText command-line interface.

Group-level options are resolved once into ``ctx.obj``:

- ``console``: the `ClickConsole` for program output;
- ``config``: the frozen `Config` (defaults, discovered files, ``--config``
  files and CLI overrides, in that order).

Internal logging is configured from the ``PWTEXT_LOG_LEVEL`` environment
variable and writes to stderr.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pwtext.cli.cmd_common import library_errors
from pwtext.cli.commands.config import config_command
from pwtext.cli.commands.format import format_command
from pwtext.cli.commands.inspect import codepoints_command, count_command, units_command
from pwtext.cli.commands.utf8 import decode_command, encode_command
from pwtext.cli.commands.version import version_command
from pwtext.cli.console import ClickConsole
from pwtext.cli.options import common_color_options, common_config_options
from pwtext.config.logging import get_logger, resolve_env_log_level, setup_logging
from pwtext.config.model import MutableConfig

if TYPE_CHECKING:
    from pwtext.core.types import SurrogatePolicy, Utf8ErrorMode

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    overrides: dict[str, object],
) -> None:
    """Initialize console and configuration on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        no_color (bool): Whether ``--no-color`` was passed.
        config_files (tuple[Path, ...]): Explicit ``--config`` files.
        no_config (bool): Skip discovery of local config files.
        overrides (dict[str, object]): CLI overrides for `MutableConfig.apply_cli_args`.
    """
    obj = ctx.ensure_object(dict)

    setup_logging(level=resolve_env_log_level())

    ctx.color = not no_color
    obj.setdefault("console", ClickConsole(enable_color=not no_color))

    if "config" in obj:
        return
    with library_errors():
        draft = MutableConfig.load_merged(
            start=Path.cwd(),
            extra_files=config_files,
            discover=not no_config,
        )
        obj["config"] = draft.apply_cli_args(overrides).freeze()
    logger.debug("Effective config: %s", obj["config"])


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PwText: UTF-16 / UTF-32 / UTF-8 transcoding with secure buffers.",
)
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    surrogate_policy: SurrogatePolicy | None,
    utf8_errors: Utf8ErrorMode | None,
    format_margin: int | None,
    lock_memory: bool | None,
) -> None:
    """Entry point for the PwText CLI."""
    init_common_state(
        ctx,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
        overrides={
            "surrogate_policy": surrogate_policy,
            "utf8_errors": utf8_errors,
            "format_margin": format_margin,
            "lock_memory": lock_memory,
        },
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(count_command)

cli.add_command(codepoints_command)

cli.add_command(units_command)

cli.add_command(encode_command)

cli.add_command(decode_command)

cli.add_command(format_command)

if __name__ == "__main__":
    cli()
