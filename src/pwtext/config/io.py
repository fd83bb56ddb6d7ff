# topmark:header:start
#
#   project      : PwText
#   file         : io.py
#   file_relpath : src/pwtext/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""TOML I/O for PwText configuration.

Parsing and rendering is done with `tomlkit`; results are plain ``dict``
structures (`TomlTable`). Runtime defaults are defined in code
(`load_defaults_dict`) so PwText works even if the packaged annotated template
cannot be read.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pwtext.config.keys import Toml
from pwtext.config.logging import get_logger
from pwtext.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE, FORMAT_MARGIN
from pwtext.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from pwtext.config.logging import PwTextLogger

TomlTable = dict[str, Any]

logger: PwTextLogger = get_logger(__name__)

_HEADER_END = "# topmark:header:end"


def load_defaults_dict() -> TomlTable:
    """Return PwText's runtime defaults as a fresh TOML-compatible dict."""
    return {
        Toml.SECTION_CODEC: {Toml.KEY_SURROGATE_POLICY: "strict"},
        Toml.SECTION_UTF8: {Toml.KEY_ERRORS: "strict"},
        Toml.SECTION_FORMAT: {Toml.KEY_MARGIN: FORMAT_MARGIN},
        Toml.SECTION_SECURE: {Toml.KEY_LOCK_MEMORY: False},
    }


def load_default_config_template_toml_text() -> str:
    """Return the bundled, annotated default config without its file header.

    Falls back to rendering `load_defaults_dict` when the packaged template
    cannot be read.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        text: str = resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())

    lines = text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == _HEADER_END:
            return "".join(lines[i + 1 :]).lstrip("\n")
    return text


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to ``pwtext.toml`` or ``pyproject.toml``.

    Returns:
        TomlTable: The parsed document as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(path.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def get_table_value(table: Mapping[str, Any], key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict."""
    value: Any = table.get(key)
    return cast("TomlTable", value) if isinstance(value, dict) else {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` entries from mappings and lists."""
    if isinstance(value, Mapping):
        m = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string (``None`` values are omitted)."""
    cleaned = cast("Mapping[str, Any]", _strip_none_for_toml(toml_dict))
    return tomlkit.dumps(cleaned)
