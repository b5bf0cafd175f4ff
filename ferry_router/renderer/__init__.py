"""Image rendering of terrain grids, ferries and routes."""

from .image import DEFAULT_PALETTE, DEFAULT_RESOLUTION, MapRenderer, render

__all__ = ["DEFAULT_PALETTE", "DEFAULT_RESOLUTION", "MapRenderer", "render"]
