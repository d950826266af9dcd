"""Configuration loading for swapui."""
from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore

from .errors import ConfigError

MIN_ID_LENGTH = 12
_PREFIX_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


@dataclass(slots=True)
class IdConfig:
    """Identifier generation settings used for targets and forms."""

    prefix: str = "i"
    length: int = 15


@dataclass(slots=True)
class SkeletonConfig:
    """Placeholder rendering defaults."""

    list_count: int = 5


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    ids: IdConfig = field(default_factory=IdConfig)
    skeleton: SkeletonConfig = field(default_factory=SkeletonConfig)


def _load_toml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path`` if provided, otherwise defaults.

    Parameters
    ----------
    path:
        Path to a ``swapui.toml`` file. When ``None`` or when the file does not
        exist the default configuration is returned.
    """

    cfg = Config()
    if path is None:
        return cfg

    data = _load_toml(Path(path))
    ids_data = data.get("ids")
    if isinstance(ids_data, Mapping):
        cfg.ids = _parse_ids(ids_data, base=cfg.ids)
    elif ids_data is not None:
        raise ConfigError("ids must be a table")
    skeleton_data = data.get("skeleton")
    if isinstance(skeleton_data, Mapping):
        cfg.skeleton = _parse_skeleton(skeleton_data, base=cfg.skeleton)
    elif skeleton_data is not None:
        raise ConfigError("skeleton must be a table")
    return cfg


def _parse_ids(data: Mapping[str, Any], base: IdConfig) -> IdConfig:
    overrides: MutableMapping[str, Any] = {}
    if "prefix" in data:
        prefix = str(data["prefix"])
        if not _PREFIX_PATTERN.match(prefix):
            raise ConfigError(
                f"ids.prefix must start with a letter and contain only letters, digits, '-' or '_': {prefix!r}"
            )
        overrides["prefix"] = prefix
    if "length" in data:
        length = _as_int(data["length"], "ids.length")
        if length < MIN_ID_LENGTH:
            raise ConfigError(f"ids.length must be at least {MIN_ID_LENGTH}, got {length}")
        overrides["length"] = length
    if not overrides:
        return base
    return replace(base, **overrides)


def _parse_skeleton(data: Mapping[str, Any], base: SkeletonConfig) -> SkeletonConfig:
    overrides: MutableMapping[str, Any] = {}
    if "list_count" in data:
        count = _as_int(data["list_count"], "skeleton.list_count")
        if count <= 0:
            raise ConfigError(f"skeleton.list_count must be positive, got {count}")
        overrides["list_count"] = count
    if not overrides:
        return base
    return replace(base, **overrides)


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer") from exc


__all__ = [
    "Config",
    "IdConfig",
    "MIN_ID_LENGTH",
    "SkeletonConfig",
    "load_config",
]
