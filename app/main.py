from typing import List, Optional

import streamlit as st

from config import (
    AppConfig,
    set_default_config,
    get_config_from_widgets,
    load_map_into_session,
)
from config.shared_ui import coordinate_section
from ferry_router.cost import terrain_kind, cost_of
from ferry_router.ferry import Ferry
from ferry_router.grid import TerrainGrid
from ferry_router.pathfinding import PathResult, find_path
from ferry_router.renderer import MapRenderer
from ferry_router.types import Coord

st.set_page_config(layout="wide", page_title="Ferry Router")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def format_cell(cell: Coord) -> str:
    return f"({cell[0]},{cell[1]})"


def display_result(result: Optional[PathResult]) -> None:
    if result is None:
        st.info("Enter start and end cells, then press Find Path.", icon="🧭")
        return
    if not result.ok:
        st.error(f"Error: {result.message}")
        return
    st.success(f"**Total Cost:** {result.cost} AP", icon="🏁")
    st.caption(" → ".join(format_cell(cell) for cell in result.path))


def path_highlight_picker(path: List[Coord]) -> Optional[Coord]:
    """Let the user pick one path cell to outline on the map."""
    if not path:
        return None
    options: List[Optional[Coord]] = [None, *path]
    choice = st.radio(
        "Highlight cell",
        options,
        format_func=lambda c: "None" if c is None else format_cell(c),
        key="highlight_radio",
        horizontal=True,
    )
    return choice


# --------- Main App ---------

set_default_config()
tab_route, tab_config, tab_map = st.tabs(["Route", "Config", "Map"])

with tab_config:
    config: AppConfig = get_config_from_widgets()
    st.session_state["config"] = config

    if st.button("Load Map", key="load_map_btn", use_container_width=True):
        load_map_into_session(config)
    st.divider()

with tab_route:
    if "grid" not in st.session_state:
        load_map_into_session(st.session_state["config"])

    grid: Optional[TerrainGrid] = st.session_state.get("grid")
    ferries: List[Ferry] = st.session_state.get("ferries", [])

    left_col, middle_col = st.columns([0.3, 0.7])

    with left_col:
        start = coordinate_section("Start", (0, 0), key="start")
        end = coordinate_section("End", (0, 0), key="end")

        if st.button("Find Path", key="find_path_btn", use_container_width=True):
            if grid is None:
                st.error("Map not loaded yet.")
            else:
                st.session_state["result"] = find_path(grid, ferries, start, end)

        result: Optional[PathResult] = st.session_state.get("result")
        display_result(result)
        highlight = path_highlight_picker(list(result.path) if result else [])

        if grid is not None and highlight is not None:
            label = grid.label_at(highlight)
            st.info(
                f"{format_cell(highlight)} **{label or '(blank)'}**: "
                f"{terrain_kind(label)}, cost {cost_of(label)}",
                icon="📍",
            )

    with middle_col:
        if grid is not None:
            renderer = MapRenderer()
            img = renderer.render(
                grid,
                ferries,
                path=result.path if result else (),
                highlight=highlight,
            )
            st.image(img, use_container_width=True)

with tab_map:
    grid = st.session_state.get("grid")
    if grid is not None:
        st.metric("Size", f"{grid.width} x {grid.height}")
        st.json(
            [
                {
                    "origin": list(f.origin),
                    "destination": list(f.destination),
                    "cost": f.cost,
                }
                for f in st.session_state.get("ferries", [])
            ],
            expanded=1,
        )
