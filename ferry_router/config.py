"""Configuration loading.

Settings live in a YAML file with three optional sections::

    router:
      map_path: maps/map.json
      ferry_path: maps/ferry.json
      max_expansions: null
    render:
      resolution: 640
      show_ferries: true
    logging:
      global_level: INFO
      module_levels:
        ferry_router.pathfinding: DEBUG

Missing files and missing keys fall back to the dataclass defaults; unknown
keys are ignored. Nothing is loaded at import time.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouterConfig:
    """Where to find input data and how hard to search."""

    map_path: Optional[str] = None
    ferry_path: Optional[str] = None
    max_expansions: Optional[int] = None


@dataclass(frozen=True)
class RenderConfig:
    resolution: int = 640
    show_ferries: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Config:
    """Top level configuration."""

    router: RouterConfig = field(default_factory=RouterConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def parse_config(data: Dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""
    router_data = data.get("router") or {}
    router = RouterConfig(
        map_path=_optional_str(router_data.get("map_path")),
        ferry_path=_optional_str(router_data.get("ferry_path")),
        max_expansions=_optional_int(router_data.get("max_expansions")),
    )

    render_data = data.get("render") or {}
    render = RenderConfig(
        resolution=int(render_data.get("resolution", 640)),
        show_ferries=bool(render_data.get("show_ferries", True)),
    )

    logging_data = data.get("logging") or {}
    logging_config = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v)
            for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(router=router, render=render, logging=logging_config)


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from ``path``; defaults if ``path`` is None or absent."""
    if path is None:
        return Config()
    path = Path(path)
    if not path.is_file():
        return Config()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(raw).__name__}")
    return parse_config(raw)


def configure_logging(config: LoggingConfig) -> None:
    """Apply ``config`` to the standard library logging tree."""
    numeric_level = getattr(logging, config.global_level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=DEFAULT_LOG_FORMAT, force=True)

    for module_name, level_str in config.module_levels.items():
        module_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_level, int):
            logging.getLogger(module_name).setLevel(module_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.",
                level_str,
                module_name,
            )


__all__ = [
    "Config",
    "LoggingConfig",
    "RenderConfig",
    "RouterConfig",
    "configure_logging",
    "load_config",
    "parse_config",
]
