# topmark:header:start
#
#   project      : PwText
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Pytest configuration for the PwText test suite.

Sets up TRACE logging for the whole run and provides typed wrappers around
pytest decorators plus small helpers shared by the test packages.

Notes:
    Build configs with `pwtext.config.model.MutableConfig`, then `freeze()` into a
    `pwtext.config.model.Config`. Do **not** mutate a frozen `Config`; call
    `Config.thaw()`, edit, and freeze again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from pwtext.config import logging
from pwtext.config.model import Config, MutableConfig

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_pwtext_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PwText's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``PWTEXT_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an isolated project directory.

    The directory holds a ``pwtext.toml`` with ``root = true`` so config discovery
    never walks above the temporary directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "pwtext.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


class RecordingAllocator:
    """Heap allocator that keeps every storage block it hands out.

    Tests inspect ``allocated`` after release to check that storage was wiped.
    """

    def __init__(self) -> None:
        self.allocated: list[bytearray] = []
        self.released: list[bytearray] = []

    def allocate(self, nbytes: int) -> bytearray:
        storage = bytearray(nbytes)
        self.allocated.append(storage)
        return storage

    def release(self, storage: bytearray) -> None:
        self.released.append(storage)


@pytest.fixture
def recording_allocator() -> RecordingAllocator:
    """Return a fresh `RecordingAllocator`."""
    return RecordingAllocator()
