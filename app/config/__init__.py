import streamlit as st
from .map_factory import load_map_into_session
from .sources import example_source, upload_source  # registration side-effects
from .sources.base import all_map_sources, find_map_source_by_config, MapSource

from .types import AppConfig

__all__ = [
    "AppConfig",
    "all_map_sources",
    "find_map_source_by_config",
    "load_map_into_session",
    "set_default_config",
    "get_config_from_widgets",
    "MapSource",
]


def _initial_config() -> AppConfig:
    src = all_map_sources()[0]
    return src.initial_config()


# Touch imported modules to placate static analyzers (ensures side-effects retained)
_ = (example_source, upload_source)


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    st.subheader("Map Source")
    sources = all_map_sources()
    source_names = [s.name for s in sources]
    current_source = find_map_source_by_config(current)
    default_idx = source_names.index(current_source.name) if current_source else 0
    selected_name = st.selectbox(
        "Source Type",
        source_names,
        index=default_idx,
        help="Select where the map and ferries come from.",
        key="source_mode_select",
    )
    chosen = next(s for s in sources if s.name == selected_name)
    if not isinstance(current, chosen.config_type):
        current = chosen.initial_config()
    return chosen.build_config(current)
