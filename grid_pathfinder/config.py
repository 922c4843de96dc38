"""Simple configuration loader for grid_pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class SearchConfig:
    """Defaults used by the development CLI when calling ``find_path``."""

    default_capacity: int = 256


@dataclass
class PathsConfig:
    """Filesystem locations."""

    maps_dir: str = "maps"
    profile_out: str = "pathfinder.prof"


@dataclass
class Config:
    """Top level configuration dataclass."""

    logging: LoggingConfig
    search: SearchConfig
    paths: PathsConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        default_capacity=int(search_data.get("default_capacity", 256)),
    )

    paths_data = data.get("paths", {}) or {}
    paths = PathsConfig(
        maps_dir=str(paths_data.get("maps_dir", "maps")),
        profile_out=str(paths_data.get("profile_out", "pathfinder.prof")),
    )

    return Config(logging=logging_cfg, search=search, paths=paths)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "SearchConfig",
    "PathsConfig",
    "load_config",
]
