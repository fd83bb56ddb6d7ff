# topmark:header:start
#
#   project      : PwText
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Tests for config loading, discovery and layering (`pwtext.config.model`)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import tomlkit

from pwtext.config.io import load_default_config_template_toml_text, load_defaults_dict
from pwtext.config.model import Config, MutableConfig
from pwtext.core.types import SurrogatePolicy, Utf8ErrorMode
from pwtext.errors import ConfigError
from pwtext.secure.allocators import HeapAllocator, LockedAllocator
from tests.conftest import make_config, parametrize


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    cfg = Config.defaults()
    assert cfg.surrogate_policy is SurrogatePolicy.STRICT
    assert cfg.utf8_errors is Utf8ErrorMode.STRICT
    assert cfg.format_margin == 50
    assert cfg.lock_memory is False
    assert isinstance(cfg.allocator(), HeapAllocator)
    assert not isinstance(cfg.allocator(), LockedAllocator)


def test_template_matches_runtime_defaults() -> None:
    template = load_default_config_template_toml_text()
    assert not template.startswith("# topmark:header")
    assert tomlkit.parse(template).unwrap() == load_defaults_dict()


def test_freeze_thaw_round_trip() -> None:
    cfg = make_config(surrogate_policy=SurrogatePolicy.LENIENT, format_margin=7)
    thawed = cfg.thaw()
    thawed.lock_memory = True
    again = thawed.freeze()
    assert again.surrogate_policy is SurrogatePolicy.LENIENT
    assert again.format_margin == 7
    assert again.lock_memory is True
    assert cfg.lock_memory is False


def test_to_toml_reparses_to_same_config() -> None:
    cfg = make_config(utf8_errors=Utf8ErrorMode.REPLACE, format_margin=0)
    data = tomlkit.parse(cfg.to_toml()).unwrap()
    assert MutableConfig.from_toml_dict(data).freeze() == cfg


def test_pwtext_toml_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pwtext.toml",
        '[codec]\nsurrogate_policy = "lenient"\n[format]\nmargin = 10\n',
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.surrogate_policy is SurrogatePolicy.LENIENT
    assert draft.format_margin == 10
    assert draft.utf8_errors is None
    assert draft.config_files == [path]


def test_pyproject_without_tool_table_is_skipped(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableConfig.from_toml_file(path) is None


@parametrize(
    "body",
    [
        '[codec]\nsurrogate_policy = "sometimes"\n',
        '[utf8]\nerrors = 3\n',
        "[format]\nmargin = -1\n",
        "[format]\nmargin = true\n",
        '[secure]\nlock_memory = "yes"\n',
        "[codec\n",
    ],
)
def test_invalid_files_raise_config_error(tmp_path: Path, body: str) -> None:
    path = _write(tmp_path / "pwtext.toml", body)
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_file(path)


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_file(tmp_path / "absent.toml")


def test_unknown_keys_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        draft = MutableConfig.from_toml_dict({"colour": "blue", "format": {"margin": 3}})
    assert draft.format_margin == 3
    assert "colour" in caplog.text


def test_discovery_order_and_root_stop(tmp_path: Path) -> None:
    outside = _write(tmp_path / "pwtext.toml", "[format]\nmargin = 1\n")
    top = tmp_path / "repo"
    _write(top / "pyproject.toml", "[tool.pwtext]\nroot = true\n[format]\nmargin = 2\n")
    mid = _write(top / "pwtext.toml", '[codec]\nsurrogate_policy = "lenient"\n')
    leaf_dir = top / "pkg" / "sub"
    leaf = _write(leaf_dir / "pwtext.toml", "[format]\nmargin = 3\n")

    found = MutableConfig.discover_local_config_files(leaf_dir)
    assert found == [(top / "pyproject.toml").resolve(), mid.resolve(), leaf.resolve()]
    assert outside.resolve() not in found

    cfg = MutableConfig.load_merged(start=leaf_dir).freeze()
    assert cfg.format_margin == 3
    assert cfg.surrogate_policy is SurrogatePolicy.LENIENT


def test_explicit_files_and_cli_override_win(tmp_path: Path) -> None:
    _write(tmp_path / "pwtext.toml", "root = true\n[format]\nmargin = 5\n")
    extra = _write(tmp_path / "extra" / "custom.toml", "[format]\nmargin = 6\n")

    merged = MutableConfig.load_merged(start=tmp_path, extra_files=[extra])
    assert merged.freeze().format_margin == 6

    cfg = merged.apply_cli_args({"format_margin": 9, "utf8_errors": "replace"}).freeze()
    assert cfg.format_margin == 9
    assert cfg.utf8_errors is Utf8ErrorMode.REPLACE
    assert cfg.config_files[-1] == extra


def test_no_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "pwtext.toml", "[format]\nmargin = 5\n")
    cfg = MutableConfig.load_merged(start=tmp_path, discover=False).freeze()
    assert cfg.format_margin == 50
    assert cfg.config_files == ()


def test_cli_override_validation() -> None:
    with pytest.raises(ConfigError):
        MutableConfig().apply_cli_args({"surrogate_policy": "maybe"})
