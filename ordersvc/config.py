"""Service configuration loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Mapping

import yaml

_MISSING = object()


@dataclass(frozen=True)
class DataSourceConfig:
    """Database addresses for reading and writing."""

    read: str
    write: str


@dataclass
class Config:
    """Settings of the order service."""

    name: str
    listen_on: str
    data_source: DataSourceConfig
    migration_path: str
    mode: str = "pro"
    cache: list[dict[str, Any]] = field(default_factory=list)


def _lookup(mapping: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    wanted = key.lower()
    for candidate, value in mapping.items():
        if str(candidate).lower() == wanted:
            return value
    if default is _MISSING:
        raise ValueError(f"config: missing required field {key!r}")
    return default


def _text(mapping: Mapping[str, Any], key: str, default: Any = _MISSING) -> str:
    value = _lookup(mapping, key, default)
    if isinstance(value, (Mapping, list)):
        raise ValueError(f"config: field {key!r} must be a scalar value")
    return str(value)


def load_config(path: str | PathLike[str]) -> Config:
    """Read a YAML configuration file; field names match case-insensitively."""
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, Mapping):
        raise ValueError("config: top level must be a mapping")

    source = _lookup(data, "DataSource")
    if not isinstance(source, Mapping):
        raise ValueError("config: field 'DataSource' must be a mapping")

    cache = _lookup(data, "Cache", [])
    if cache is None:
        cache = []
    if not isinstance(cache, list) or not all(isinstance(n, Mapping) for n in cache):
        raise ValueError("config: field 'Cache' must be a list of mappings")

    return Config(
        name=_text(data, "Name"),
        listen_on=_text(data, "ListenOn"),
        data_source=DataSourceConfig(
            read=_text(source, "Read"), write=_text(source, "Write")
        ),
        migration_path=_text(data, "MigrationPath"),
        mode=_text(data, "Mode", "pro"),
        cache=[dict(node) for node in cache],
    )