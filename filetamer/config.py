"""Configuration model and loading from YAML, TOML or JSON files."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import MISSING, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml


class ConfigError(Exception):
    """Raised when a configuration cannot be read or is invalid."""


def _boolean(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name}: expected a boolean, got {value!r}")
    return value


def _string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{name}: expected a string, got {value!r}")
    return value


def _string_list(name: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{name}: expected a list of strings, got {value!r}")
    return list(value)


def _unsigned(bits: int) -> Callable[[str, Any], int]:
    limit = 2**bits

    def parse(name: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < limit:
            raise ConfigError(f"{name}: expected an unsigned {bits}-bit integer, got {value!r}")
        return value

    return parse


def _optional(parse: Callable[[str, Any], Any]) -> Callable[[str, Any], Any]:
    def parse_optional(name: str, value: Any) -> Any:
        return None if value is None else parse(name, value)

    return parse_optional


def _path(name: str, value: Any) -> Path:
    if isinstance(value, Path):
        return value
    return Path(_string(name, value))


def _setting(default: Any = MISSING, *, factory: Any = MISSING, parse: Callable) -> Any:
    if factory is not MISSING:
        return field(default_factory=factory, metadata={"parse": parse})
    return field(default=default, metadata={"parse": parse})


@dataclass
class Filters:
    """File filtering rules applied before any operation."""

    include_patterns: list[str] = _setting(factory=lambda: ["**/*"], parse=_string_list)
    exclude_patterns: list[str] = _setting(factory=list, parse=_string_list)
    older_than_days: int | None = _setting(None, parse=_optional(_unsigned(64)))
    min_size: int | None = _setting(None, parse=_optional(_unsigned(64)))
    max_size: int | None = _setting(None, parse=_optional(_unsigned(64)))


@dataclass
class CleanupOptions:
    """How matched files are cleaned up: deleted or archived."""

    delete: bool = _setting(False, parse=_boolean)
    archive: bool = _setting(False, parse=_boolean)
    archive_format: str = _setting("zip", parse=_string)
    archive_output: Path | None = _setting(None, parse=_optional(_path))
    keep_original: bool = _setting(False, parse=_boolean)
    compression_level: int = _setting(6, parse=_unsigned(32))


@dataclass
class TransferOptions:
    """How matched files are transferred: copied or moved."""

    copy: bool = _setting(False, parse=_boolean)
    preserve_structure: bool = _setting(True, parse=_boolean)
    conflict_suffix: str = _setting("_copy", parse=_string)


def _section(kind: type, name: str, data: Any) -> Any:
    if data is None:
        return kind()
    if not isinstance(data, Mapping):
        raise ConfigError(f"{name}: expected a table, got {data!r}")
    values = {
        spec.name: spec.metadata["parse"](f"{name}.{spec.name}", data[spec.name])
        for spec in fields(kind)
        if spec.name in data
    }
    return kind(**values)


@dataclass
class Config:
    """Complete configuration: filters, cleanup and transfer settings."""

    filters: Filters = field(default_factory=Filters)
    cleanup: CleanupOptions = field(default_factory=CleanupOptions)
    transfer: TransferOptions = field(default_factory=TransferOptions)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a configuration from parsed data, filling in defaults."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"configuration: expected a table, got {data!r}")
        return cls(
            filters=_section(Filters, "filters", data.get("filters")),
            cleanup=_section(CleanupOptions, "cleanup", data.get("cleanup")),
            transfer=_section(TransferOptions, "transfer", data.get("transfer")),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load a configuration, choosing the format by file extension."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read config file: {path}: {exc}") from exc

        ext = path.suffix[1:]
        if ext in ("yaml", "yml"):
            kind, loader, errors = "YAML", yaml.safe_load, (yaml.YAMLError,)
        elif ext == "toml":
            kind, loader, errors = "TOML", tomllib.loads, (tomllib.TOMLDecodeError,)
        elif ext == "json":
            kind, loader, errors = "JSON", json.loads, (json.JSONDecodeError,)
        else:
            raise ConfigError(f"Unknown config file format: {ext}")

        try:
            return cls.from_dict(loader(text))
        except (ConfigError, *errors) as exc:
            raise ConfigError(f"Error parsing {kind} config: {exc}") from exc