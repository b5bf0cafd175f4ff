from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple
from PIL import Image, ImageDraw
from ferry_router.ferry import Ferry
from ferry_router.grid import TerrainGrid
from ferry_router.types import Coord, TerrainKind
from ferry_router.utils.image import (
    draw_dashed_line,
    terrain_color_array,
    upscale_cells,
)


DEFAULT_RESOLUTION = 640

DEFAULT_PALETTE: Dict[TerrainKind, Tuple[int, int, int]] = {
    TerrainKind.VOID: (0x11, 0x11, 0x11),
    TerrainKind.SEA: (0x66, 0xAA, 0xFF),
    TerrainKind.MOUNTAIN: (0x88, 0x88, 0x88),
    TerrainKind.PLAINS: (0xAA, 0xFF, 0xAA),
}

GRID_LINE_COLOR = (0x44, 0x44, 0x44, 255)
FERRY_COLOR = (0x8A, 0x2B, 0xE2, 255)
PATH_COLOR = (0xFF, 0xD7, 0x00, 255)
PATH_NODE_COLOR = (0xFF, 0x00, 0x00, 255)
HIGHLIGHT_COLOR = (0xFF, 0xFF, 0x00, 255)


def cell_size_for(grid: TerrainGrid, resolution: int) -> int:
    """Square cell size fitting the grid into ``resolution`` pixels (at least 1)."""
    longest = max(grid.width, grid.height, 1)
    return max(1, resolution // longest)


def _center(cell: Coord, cell_size: int) -> Tuple[float, float]:
    x, y = cell
    return (x * cell_size + cell_size / 2, y * cell_size + cell_size / 2)


def render(
    grid: TerrainGrid,
    ferries: Sequence[Ferry] = (),
    path: Sequence[Coord] = (),
    highlight: Optional[Coord] = None,
    resolution: int = DEFAULT_RESOLUTION,
    show_ferries: bool = True,
    palette: Optional[Dict[TerrainKind, Tuple[int, int, int]]] = None,
) -> Image.Image:
    """
    Renders a terrain grid as a PIL Image.

    Layers, bottom to top: terrain fills with cell outlines, ferries whose
    endpoints are both in bounds as dashed lines, the path as a solid line
    with a square marker on every cell, and an outline around ``highlight``.
    An empty grid renders as a 1x1 transparent image.
    """
    if grid.is_empty():
        return Image.new("RGBA", (1, 1), (0, 0, 0, 0))

    cell_size = cell_size_for(grid, resolution)
    img = upscale_cells(
        terrain_color_array(grid.rows, palette or DEFAULT_PALETTE), cell_size
    )
    draw = ImageDraw.Draw(img)

    if cell_size >= 3:
        for y in range(grid.height):
            for x in range(grid.width):
                x0, y0 = x * cell_size, y * cell_size
                draw.rectangle(
                    [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                    outline=GRID_LINE_COLOR,
                )

    if show_ferries:
        for ferry in ferries:
            if grid.in_bounds(ferry.origin) and grid.in_bounds(ferry.destination):
                draw_dashed_line(
                    draw,
                    _center(ferry.origin, cell_size),
                    _center(ferry.destination, cell_size),
                    fill=FERRY_COLOR,
                )

    if path:
        centers = [_center(cell, cell_size) for cell in path]
        if len(centers) > 1:
            draw.line(centers, fill=PATH_COLOR, width=max(1, cell_size // 8))
        quarter = cell_size * 0.25
        for x, y in path:
            x0, y0 = x * cell_size + quarter, y * cell_size + quarter
            draw.rectangle(
                [x0, y0, x0 + cell_size * 0.5, y0 + cell_size * 0.5],
                fill=PATH_NODE_COLOR,
            )

    if highlight is not None and grid.in_bounds(highlight):
        hx, hy = highlight
        draw.rectangle(
            [
                hx * cell_size + 2,
                hy * cell_size + 2,
                (hx + 1) * cell_size - 3,
                (hy + 1) * cell_size - 3,
            ],
            outline=HIGHLIGHT_COLOR,
            width=3,
        )

    return img


@dataclass
class MapRenderer:
    resolution: int = DEFAULT_RESOLUTION
    show_ferries: bool = True
    palette: Optional[Dict[TerrainKind, Tuple[int, int, int]]] = None

    def render(
        self,
        grid: TerrainGrid,
        ferries: Sequence[Ferry] = (),
        path: Sequence[Coord] = (),
        highlight: Optional[Coord] = None,
    ) -> Image.Image:
        return render(
            grid,
            ferries,
            path=path,
            highlight=highlight,
            resolution=self.resolution,
            show_ferries=self.show_ferries,
            palette=self.palette,
        )
