# topmark:header:start
#
#   project      : PwText
#   file         : errors.py
#   file_relpath : src/pwtext/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Exceptions for the PwText CLI.

Library errors (`pwtext.errors`) are translated into these `click` exceptions by
`translate_error` so each failure class gets its own exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from pwtext.cli.exit_codes import ExitCode
from pwtext.errors import ConfigError, PwTextError


class PwTextCliError(click.ClickException):
    """Base class for all PwText CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr."""
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="bright_red")


class PwTextUsageError(PwTextCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PwTextConfigError(PwTextCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PwTextEncodingError(PwTextCliError):
    """Error for malformed input or a failed conversion."""

    exit_code = ExitCode.ENCODING_ERROR


def translate_error(exc: PwTextError) -> PwTextCliError:
    """Return the CLI exception matching a library error."""
    if isinstance(exc, ConfigError):
        return PwTextConfigError(str(exc))
    return PwTextEncodingError(str(exc))
