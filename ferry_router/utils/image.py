import math
import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw
from typing import Dict, Sequence, Tuple

from ferry_router.cost import terrain_kind
from ferry_router.types import TerrainKind

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


def terrain_color_array(
    rows: Sequence[Sequence[str]], palette: Dict[TerrainKind, RGB]
) -> UInt8Array:
    """
    Build an (height, width, 4) RGBA array with one pixel per grid cell.
    """
    height = len(rows)
    width = len(rows[0]) if height else 0
    arr: UInt8Array = np.zeros((height, width, 4), dtype=np.uint8)
    arr[..., 3] = 255
    for y, row in enumerate(rows):
        for x, label in enumerate(row):
            arr[y, x, :3] = palette[terrain_kind(label)]
    return arr


def upscale_cells(arr: UInt8Array, cell_size: int) -> Image.Image:
    """
    Turn a per-cell array into an image where every cell is a ``cell_size`` square.
    """
    scaled: UInt8Array = np.repeat(np.repeat(arr, cell_size, axis=0), cell_size, axis=1)
    return Image.fromarray(scaled)


def draw_dashed_line(
    draw: ImageDraw.ImageDraw,
    start: Tuple[float, float],
    end: Tuple[float, float],
    fill: RGBA,
    width: int = 2,
    dash: int = 6,
    gap: int = 4,
) -> None:
    """
    Draw a dashed segment from ``start`` to ``end``; dashes of ``dash`` pixels
    separated by ``gap`` pixels, starting with a dash at ``start``.
    """
    x0, y0 = start
    x1, y1 = end
    length = math.hypot(x1 - x0, y1 - y0)
    if length == 0:
        return
    ux, uy = (x1 - x0) / length, (y1 - y0) / length
    pos = 0.0
    while pos < length:
        seg_end = min(pos + dash, length)
        draw.line(
            [
                (x0 + ux * pos, y0 + uy * pos),
                (x0 + ux * seg_end, y0 + uy * seg_end),
            ],
            fill=fill,
            width=width,
        )
        pos = seg_end + gap
