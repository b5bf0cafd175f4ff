from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from ferry_router.examples.islands import Example
from ferry_router.grid import TerrainGrid
from ferry_router.loader import normalize_ferries
from .base import MapSource, register_map_source


@dataclass(frozen=True)
class UploadConfig:
    map_text: Optional[str]
    ferry_text: Optional[str]


def build_upload_config(current: object) -> UploadConfig:
    st.info(
        "Upload map.json (list of rows of terrain labels) and optionally ferry.json.",
        icon="📂",
    )
    map_file = st.file_uploader("Map JSON", type=["json"], key="upload_map")
    ferry_file = st.file_uploader("Ferry JSON", type=["json"], key="upload_ferry")
    previous = current if isinstance(current, UploadConfig) else UploadConfig(None, None)
    return UploadConfig(
        map_text=map_file.getvalue().decode("utf-8") if map_file else previous.map_text,
        ferry_text=(
            ferry_file.getvalue().decode("utf-8") if ferry_file else previous.ferry_text
        ),
    )


def _load_upload(cfg: UploadConfig) -> Example:
    if not cfg.map_text:
        raise ValueError("No map uploaded yet")
    try:
        rows = json.loads(cfg.map_text)
        raw_ferries = json.loads(cfg.ferry_text) if cfg.ferry_text else []
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise ValueError("Map must be a JSON list of rows")
    return TerrainGrid.from_rows(rows), normalize_ferries(raw_ferries)


register_map_source(
    MapSource(
        name="Uploaded Files",
        config_type=UploadConfig,
        initial_config=lambda: UploadConfig(None, None),
        build_config=build_upload_config,
        load_map=_load_upload,
    )
)
