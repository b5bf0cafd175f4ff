from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from ferry_router.examples.islands import Example


@dataclass
class MapSource:
    """Plugin describing where a map and its ferries come from.

    Attributes:
        name: Human‑readable name shown in UI select box.
        config_type: Dataclass type representing this source's config.
        initial_config: Zero‑arg callable returning a default config instance.
        build_config: (current_config) -> new_config, renders Streamlit widgets.
        load_map: (config) -> (TerrainGrid, ferries). May raise ``ValueError``.
    """

    name: str
    config_type: Type[Any]
    initial_config: Callable[[], Any]
    build_config: Callable[[Any], Any]
    load_map: Callable[[Any], Example]


_MAP_SOURCE_REGISTRY: List[MapSource] = []
_NAME_INDEX: Dict[str, MapSource] = {}


def register_map_source(source: MapSource) -> None:
    if source.name in _NAME_INDEX:
        # Streamlit reruns re-import modules; replace the earlier entry.
        existing_idx = next(
            i for i, s in enumerate(_MAP_SOURCE_REGISTRY) if s.name == source.name
        )
        _MAP_SOURCE_REGISTRY[existing_idx] = source
    else:
        _MAP_SOURCE_REGISTRY.append(source)
    _NAME_INDEX[source.name] = source


def all_map_sources() -> List[MapSource]:
    """Return registered sources sorted by name for stable UI ordering."""
    return sorted(_MAP_SOURCE_REGISTRY, key=lambda s: s.name.lower())


def find_map_source_by_config(config: object) -> Optional[MapSource]:
    for src in _MAP_SOURCE_REGISTRY:
        if isinstance(config, src.config_type):
            return src
    return None
