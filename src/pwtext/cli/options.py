# topmark:header:start
#
#   project      : PwText
#   file         : options.py
#   file_relpath : src/pwtext/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Reusable option groups for the PwText CLI.

Commands stay thin: the root group carries the color and configuration options
and stores the resolved state in ``ctx.obj``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from pwtext.cli.cli_types import KeyedChoiceParam
from pwtext.core.types import SurrogatePolicy, Utf8ErrorMode

P = ParamSpec("P")
R = TypeVar("R")


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color`` to a command."""
    return click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add config-file and config-override options to a command.

    Overrides default to ``None`` so unset flags inherit from config files.
    """
    f = click.option(
        "--lock-memory/--no-lock-memory",
        "lock_memory",
        default=None,
        help="Lock secure buffers into RAM (best effort).",
    )(f)
    f = click.option(
        "--margin",
        "format_margin",
        type=click.IntRange(min=0),
        default=None,
        help="Extra code units added to the formatter's first buffer.",
    )(f)
    f = click.option(
        "--utf8-errors",
        "utf8_errors",
        type=KeyedChoiceParam(Utf8ErrorMode),
        default=None,
        help=f"UTF-8 error handling ({', '.join(Utf8ErrorMode.keys())}).",
    )(f)
    f = click.option(
        "--surrogate-policy",
        "surrogate_policy",
        type=KeyedChoiceParam(SurrogatePolicy),
        default=None,
        help=f"Lone low surrogate handling ({', '.join(SurrogatePolicy.keys())}).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Do not discover pwtext.toml / pyproject.toml from the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra config file (repeatable). Applied after discovered files.",
    )(f)
    return f
