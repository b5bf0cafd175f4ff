from __future__ import annotations

import streamlit as st

from ferry_router.types import Coord


def seed_section(key: str) -> int:
    st.subheader("Random seed")
    return st.number_input("Random seed", min_value=0, value=0, key=key)


def coordinate_section(label: str, default: Coord, key: str) -> Coord:
    """Two integer inputs for a cell. Bounds are left to the router so that
    out-of-range requests are reported like any other routing error."""
    st.markdown(f"**{label}**")
    x_col, y_col = st.columns(2)
    with x_col:
        x = st.number_input("X", value=default[0], step=1, key=f"{key}_x")
    with y_col:
        y = st.number_input("Y", value=default[1], step=1, key=f"{key}_y")
    return int(x), int(y)


__all__ = ["seed_section", "coordinate_section"]
