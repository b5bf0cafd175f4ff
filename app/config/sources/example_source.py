from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from ferry_router.examples import archipelago, random_islands
from ferry_router.examples.islands import Example
from .base import MapSource, register_map_source
from ..shared_ui import seed_section


_EXAMPLE_NAMES = ["Archipelago", "Random Islands"]


@dataclass(frozen=True)
class ExampleConfig:
    example_name: str
    width: int
    height: int
    num_ferries: int
    seed: Optional[int]


def build_example_config(current: object) -> ExampleConfig:
    st.info("Pick a built-in map.", icon="🗺️")
    base = (
        current
        if isinstance(current, ExampleConfig)
        else _default_example_config()
    )
    example_name = st.selectbox(
        "Example",
        _EXAMPLE_NAMES,
        index=_EXAMPLE_NAMES.index(base.example_name),
        key="example_select",
    )
    width, height, num_ferries = base.width, base.height, base.num_ferries
    if example_name == "Random Islands":
        width = st.slider("Map width", 3, 60, base.width, key="example_width")
        height = st.slider("Map height", 3, 60, base.height, key="example_height")
        num_ferries = st.slider(
            "Ferries", 0, 20, base.num_ferries, key="example_num_ferries"
        )
    seed = seed_section(key="example_seed")
    return ExampleConfig(
        example_name=example_name,
        width=width,
        height=height,
        num_ferries=num_ferries,
        seed=seed,
    )


def _load_example(cfg: ExampleConfig) -> Example:
    if cfg.example_name == "Archipelago":
        return archipelago()
    if cfg.example_name == "Random Islands":
        return random_islands(
            width=cfg.width,
            height=cfg.height,
            num_ferries=cfg.num_ferries,
            seed=cfg.seed,
        )
    raise ValueError(f"Unknown example map: {cfg.example_name}")


def _default_example_config() -> ExampleConfig:
    return ExampleConfig(
        example_name="Archipelago", width=20, height=15, num_ferries=4, seed=0
    )


register_map_source(
    MapSource(
        name="Built-in Example",
        config_type=ExampleConfig,
        initial_config=_default_example_config,
        build_config=build_example_config,
        load_map=_load_example,
    )
)
