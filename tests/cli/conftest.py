# topmark:header:start
#
#   project      : PwText
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group with a fresh ``ctx.obj`` so no state leaks
between tests. Pair it with the ``isolation`` fixture when the command must not
see config files from the developer's working tree.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from pwtext.cli.exit_codes import ExitCode
from pwtext.cli.main import cli
from pwtext.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall TRACE logging after each CLI run.

    The root group reconfigures logging against the runner's temporary stderr.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["count", "abc"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_ENCODING_ERROR(result: Result) -> None:
    """Assert that the command exited with ENCODING_ERROR (code 65)."""
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
