# topmark:header:start
#
#   project      : PwText
#   file         : test_inspect_commands.py
#   file_relpath : tests/cli/test_inspect_commands.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Tests for the `count`, `codepoints` and `units` commands."""

from __future__ import annotations

from pathlib import Path

from tests.cli.conftest import assert_ENCODING_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_count(isolation: Path) -> None:
    result = run_cli(["count", "a\U0001F600€"])
    assert_SUCCESS(result)
    assert "code units:  4" in result.output
    assert "code points: 3" in result.output
    assert "utf-8 bytes: 8" in result.output


@mark_cli
def test_count_reads_stdin(isolation: Path) -> None:
    result = run_cli(["count", "-"], input_text="abc\n")
    assert_SUCCESS(result)
    assert "code units:  3" in result.output


@mark_cli
def test_codepoints_and_units(isolation: Path) -> None:
    result = run_cli(["codepoints", "A\U0001F600"])
    assert_SUCCESS(result)
    assert result.output.strip() == "U+0041 U+1F600"

    result = run_cli(["units", "A\U0001F600"])
    assert_SUCCESS(result)
    assert result.output.strip() == "0041 D83D DE00"


@mark_cli
def test_lone_low_surrogate_follows_policy(isolation: Path) -> None:
    assert_ENCODING_ERROR(run_cli(["codepoints", "a\udc00"]))

    result = run_cli(["--surrogate-policy", "lenient", "codepoints", "a\udc00"])
    assert_SUCCESS(result)
    assert result.output.strip() == "U+0061 U+DC00"


@mark_cli
def test_count_lone_surrogate_needs_replace_mode(isolation: Path) -> None:
    assert_ENCODING_ERROR(run_cli(["--surrogate-policy", "lenient", "count", "\udc00"]))

    result = run_cli(
        ["--surrogate-policy", "lenient", "--utf8-errors", "replace", "count", "\udc00"]
    )
    assert_SUCCESS(result)
    assert "utf-8 bytes: 3" in result.output


@mark_cli
def test_policy_from_config_file(isolation: Path) -> None:
    (isolation / "pwtext.toml").write_text(
        'root = true\n[codec]\nsurrogate_policy = "lenient"\n', encoding="utf-8"
    )
    result = run_cli(["codepoints", "\udc00"])
    assert_SUCCESS(result)
    assert result.output.strip() == "U+DC00"
