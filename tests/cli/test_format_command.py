# topmark:header:start
#
#   project      : PwText
#   file         : test_format_command.py
#   file_relpath : tests/cli/test_format_command.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Tests for the `format` command."""

from __future__ import annotations

from pathlib import Path

from pwtext.cli.commands.format import coerce_arg
from tests.cli.conftest import assert_ENCODING_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize


@parametrize("raw, expected", [("1", 1), ("-2", -2), ("1.5", 1.5), ("abc", "abc")])
def test_coerce_arg(raw: str, expected: object) -> None:
    assert coerce_arg(raw) == expected
    assert type(coerce_arg(raw)) is type(expected)


@mark_cli
@parametrize("secure", [[], ["--secure"]])
def test_format(isolation: Path, secure: list[str]) -> None:
    result = run_cli(["format", *secure, "%d-%d", "1", "2"])
    assert_SUCCESS(result)
    assert result.output.strip() == "1-2"


@mark_cli
def test_format_long_output(isolation: Path) -> None:
    long_arg = "w" * 500
    result = run_cli(["--margin", "0", "format", "[%s]", long_arg])
    assert_SUCCESS(result)
    assert result.output.strip() == f"[{long_arg}]"


@mark_cli
def test_format_mismatch_is_an_error(isolation: Path) -> None:
    result = run_cli(["format", "%d", "abc"])
    assert_ENCODING_ERROR(result)
    assert "Error while formatting string" in result.output


@mark_cli
@parametrize("argv", [["%d", "inf"], ["%c", "1114112"], ["--secure", "%d", "nan"]])
def test_format_unrenderable_value_is_an_error(isolation: Path, argv: list[str]) -> None:
    result = run_cli(["format", *argv])
    assert_ENCODING_ERROR(result)
    assert "Error while formatting string" in result.output
