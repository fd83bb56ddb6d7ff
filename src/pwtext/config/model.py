# topmark:header:start
#
#   project      : PwText
#   file         : model.py
#   file_relpath : src/pwtext/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to conversions.
    - `MutableConfig`: a mutable builder used during discovery/merge; it can be
      frozen into `Config` and thawed back for edits.

Fields of `MutableConfig` are tri-state (``None`` = inherit) so that layered
sources merge without losing information; `MutableConfig.freeze` resolves any
remaining ``None`` against the runtime defaults.

Layering (lowest to highest precedence): runtime defaults, discovered config
files (root-most first, nearest last), explicit ``--config`` files, CLI
overrides.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pwtext.bridge.backend import CodecsDecoder, CodecsEncoder
from pwtext.config.io import get_table_value, load_defaults_dict, load_toml_dict, to_toml
from pwtext.config.keys import Toml
from pwtext.config.logging import get_logger
from pwtext.constants import FORMAT_MARGIN, PWTEXT_TOML_NAME, PYPROJECT_TOML_NAME
from pwtext.core.types import SurrogatePolicy, Utf8ErrorMode
from pwtext.errors import ConfigError
from pwtext.secure.allocators import HeapAllocator, LockedAllocator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pwtext.config.io import TomlTable
    from pwtext.config.logging import PwTextLogger
    from pwtext.secure.allocators import Allocator

logger: PwTextLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for PwText.

    Attributes:
        surrogate_policy (SurrogatePolicy): Handling of lone low surrogates.
        utf8_errors (Utf8ErrorMode): Error mode of the default UTF-8 back end.
        format_margin (int): Margin added to the formatter's first-attempt capacity.
        lock_memory (bool): Whether secure buffers use a `LockedAllocator`.
        config_files (tuple[Path, ...]): Config sources that contributed, in merge order.
    """

    surrogate_policy: SurrogatePolicy
    utf8_errors: Utf8ErrorMode
    format_margin: int
    lock_memory: bool
    config_files: tuple[Path, ...] = ()

    @classmethod
    def defaults(cls) -> Config:
        """Return the runtime defaults as a frozen config."""
        return MutableConfig.from_defaults().freeze()

    def encoder(self) -> CodecsEncoder:
        """Return a UTF-8 encode capability honoring `utf8_errors`."""
        return CodecsEncoder(self.utf8_errors)

    def decoder(self) -> CodecsDecoder:
        """Return a UTF-8 decode capability honoring `utf8_errors`."""
        return CodecsDecoder(self.utf8_errors)

    def allocator(self) -> Allocator:
        """Return the secure-buffer allocator selected by `lock_memory`."""
        return LockedAllocator() if self.lock_memory else HeapAllocator()

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict."""
        return {
            Toml.SECTION_CODEC: {Toml.KEY_SURROGATE_POLICY: self.surrogate_policy.key},
            Toml.SECTION_UTF8: {Toml.KEY_ERRORS: self.utf8_errors.key},
            Toml.SECTION_FORMAT: {Toml.KEY_MARGIN: self.format_margin},
            Toml.SECTION_SECURE: {Toml.KEY_LOCK_MEMORY: self.lock_memory},
        }

    def to_toml(self) -> str:
        """Render this config as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            surrogate_policy=self.surrogate_policy,
            utf8_errors=self.utf8_errors,
            format_margin=self.format_margin,
            lock_memory=self.lock_memory,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


def _parse_enum(
    enum_cls: type[SurrogatePolicy] | type[Utf8ErrorMode],
    raw: Any,
    where: str,
) -> Any:
    if raw is None:
        return None
    member = enum_cls.parse(raw) if isinstance(raw, str) else None
    if member is None:
        raise ConfigError(
            f"Invalid value {raw!r} for {where}; expected one of {', '.join(enum_cls.keys())}"
        )
    return member


def _parse_margin(raw: Any, where: str) -> int | None:
    if raw is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise ConfigError(f"Invalid value {raw!r} for {where}; expected an integer >= 0")
    return raw


def _parse_bool(raw: Any, where: str) -> bool | None:
    if raw is None:
        return None
    if not isinstance(raw, bool):
        raise ConfigError(f"Invalid value {raw!r} for {where}; expected true or false")
    return raw


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        surrogate_policy (SurrogatePolicy | None): ``None`` = inherit.
        utf8_errors (Utf8ErrorMode | None): ``None`` = inherit.
        format_margin (int | None): ``None`` = inherit.
        lock_memory (bool | None): ``None`` = inherit.
        config_files (list[Path]): Config sources that contributed.
    """

    surrogate_policy: SurrogatePolicy | None = None
    utf8_errors: Utf8ErrorMode | None = None
    format_margin: int | None = None
    lock_memory: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset values."""
        return Config(
            surrogate_policy=self.surrogate_policy or SurrogatePolicy.STRICT,
            utf8_errors=self.utf8_errors or Utf8ErrorMode.STRICT,
            format_margin=self.format_margin if self.format_margin is not None else FORMAT_MARGIN,
            lock_memory=bool(self.lock_memory),
            config_files=tuple(self.config_files),
        )

    # ---------------------------- Sources ----------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any]) -> MutableConfig:
        """Build a draft from a parsed PwText TOML table.

        Unknown sections and keys are ignored (and logged).

        Raises:
            ConfigError: If a known key holds an invalid value.
        """
        known = {
            Toml.KEY_ROOT,
            Toml.SECTION_CODEC,
            Toml.SECTION_UTF8,
            Toml.SECTION_FORMAT,
            Toml.SECTION_SECURE,
        }
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown config key: %s", key)

        codec = get_table_value(data, Toml.SECTION_CODEC)
        utf8 = get_table_value(data, Toml.SECTION_UTF8)
        fmt = get_table_value(data, Toml.SECTION_FORMAT)
        secure = get_table_value(data, Toml.SECTION_SECURE)

        return cls(
            surrogate_policy=_parse_enum(
                SurrogatePolicy,
                codec.get(Toml.KEY_SURROGATE_POLICY),
                f"[{Toml.SECTION_CODEC}].{Toml.KEY_SURROGATE_POLICY}",
            ),
            utf8_errors=_parse_enum(
                Utf8ErrorMode,
                utf8.get(Toml.KEY_ERRORS),
                f"[{Toml.SECTION_UTF8}].{Toml.KEY_ERRORS}",
            ),
            format_margin=_parse_margin(
                fmt.get(Toml.KEY_MARGIN),
                f"[{Toml.SECTION_FORMAT}].{Toml.KEY_MARGIN}",
            ),
            lock_memory=_parse_bool(
                secure.get(Toml.KEY_LOCK_MEMORY),
                f"[{Toml.SECTION_SECURE}].{Toml.KEY_LOCK_MEMORY}",
            ),
        )

    @staticmethod
    def _section_of(path: Path, data: TomlTable) -> TomlTable | None:
        if path.name == PYPROJECT_TOML_NAME:
            tool = get_table_value(get_table_value(data, "tool"), Toml.TOOL_SECTION)
            return tool or None
        return data

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from one TOML file.

        Supports ``pwtext.toml`` and the ``[tool.pwtext]`` table of
        ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or ``None`` if a ``pyproject.toml``
            has no ``[tool.pwtext]`` table.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        section = cls._section_of(path, load_toml_dict(path))
        if section is None:
            logger.debug("No [tool.%s] table in %s", Toml.TOOL_SECTION, path)
            return None
        draft = cls.from_toml_dict(section)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first, nearest last; within a directory
        ``pyproject.toml`` comes before ``pwtext.toml`` so the latter wins. A file
        setting ``root = true`` stops the walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here = False
            entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, PWTEXT_TOML_NAME):
                p = cur / name
                if not p.is_file():
                    continue
                try:
                    section = cls._section_of(p, load_toml_dict(p))
                except ConfigError as exc:
                    # Unparseable files are reported when they are loaded, not here.
                    logger.debug("Ignoring unreadable config %s during discovery: %s", p, exc)
                    entries.append(p)
                    continue
                if section is None:
                    continue
                entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if section.get(Toml.KEY_ROOT) is True:
                    stop_here = True
            if entries:
                per_dir.append(entries)
            if stop_here or cur.parent == cur:
                break
            cur = cur.parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Return defaults merged with discovered and explicit config files.

        Args:
            start (Path | None): Directory where discovery starts (CWD by default).
            extra_files (Iterable[Path]): Explicit config files, applied last.
            discover (bool): Whether to walk upward from ``start``.

        Returns:
            MutableConfig: The merged draft.
        """
        merged = cls.from_defaults()
        sources: list[Path] = []
        if discover:
            sources.extend(cls.discover_local_config_files(start or Path.cwd()))
        sources.extend(extra_files)
        for path in sources:
            draft = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            surrogate_policy=other.surrogate_policy or self.surrogate_policy,
            utf8_errors=other.utf8_errors or self.utf8_errors,
            format_margin=other.format_margin
            if other.format_margin is not None
            else self.format_margin,
            lock_memory=other.lock_memory if other.lock_memory is not None else self.lock_memory,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        Recognized keys: ``surrogate_policy``, ``utf8_errors``, ``format_margin``,
        ``lock_memory``. ``None`` values leave the current setting untouched.
        """
        if args.get("surrogate_policy") is not None:
            self.surrogate_policy = _parse_enum(
                SurrogatePolicy, args["surrogate_policy"], "--surrogate-policy"
            )
        if args.get("utf8_errors") is not None:
            self.utf8_errors = _parse_enum(Utf8ErrorMode, args["utf8_errors"], "--utf8-errors")
        if args.get("format_margin") is not None:
            self.format_margin = _parse_margin(args["format_margin"], "--margin")
        if args.get("lock_memory") is not None:
            self.lock_memory = _parse_bool(args["lock_memory"], "--lock-memory")
        return self
