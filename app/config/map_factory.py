from __future__ import annotations

import streamlit as st

from ferry_router.grid import MalformedGridError
from .types import AppConfig
from .sources.base import find_map_source_by_config


def load_map_into_session(config: AppConfig) -> None:
    """Load the map for ``config`` via its registered source.

    Centralizes session_state bookkeeping (grid, ferries, last result) so
    individual sources only focus on producing map data.
    """
    source = find_map_source_by_config(config)
    if source is None:
        raise ValueError(
            f"No registered map source for config type: {type(config).__name__}"
        )
    try:
        grid, ferries = source.load_map(config)
    except (MalformedGridError, ValueError) as e:
        st.error(f"Map loading failed: {e}")
        return
    st.session_state["grid"] = grid
    st.session_state["ferries"] = ferries
    st.session_state["result"] = None
    st.session_state["highlight"] = None
