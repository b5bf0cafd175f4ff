from PIL import Image, ImageDraw

from ferry_router.ferry import Ferry
from ferry_router.grid import TerrainGrid
from ferry_router.renderer import DEFAULT_PALETTE, MapRenderer, render
from ferry_router.renderer.image import (
    FERRY_COLOR,
    HIGHLIGHT_COLOR,
    PATH_NODE_COLOR,
    cell_size_for,
)
from ferry_router.types import TerrainKind
from ferry_router.utils.image import (
    draw_dashed_line,
    terrain_color_array,
    upscale_cells,
)
from tests.test_utils import make_grid


def rgb(img: Image.Image, xy) -> tuple:
    return img.getpixel(xy)[:3]


def test_image_size_follows_grid_shape() -> None:
    img = render(make_grid("....", "~~~~"), resolution=40)
    assert img.size == (40, 20)
    assert img.mode == "RGBA"


def test_cell_size_is_at_least_one() -> None:
    grid = make_grid("." * 50)
    assert cell_size_for(grid, 10) == 1
    assert render(grid, resolution=10).size == (50, 1)


def test_empty_grid_renders_placeholder() -> None:
    img = render(TerrainGrid())
    assert img.size == (1, 1)
    assert img.getpixel((0, 0)) == (0, 0, 0, 0)


def test_terrain_colors() -> None:
    img = render(make_grid(".~^#"), resolution=40)
    assert rgb(img, (5, 5)) == DEFAULT_PALETTE[TerrainKind.PLAINS]
    assert rgb(img, (15, 5)) == DEFAULT_PALETTE[TerrainKind.SEA]
    assert rgb(img, (25, 5)) == DEFAULT_PALETTE[TerrainKind.MOUNTAIN]
    assert rgb(img, (35, 5)) == DEFAULT_PALETTE[TerrainKind.VOID]


def test_custom_palette() -> None:
    palette = dict(DEFAULT_PALETTE)
    palette[TerrainKind.PLAINS] = (1, 2, 3)
    img = MapRenderer(resolution=10, palette=palette).render(make_grid("."))
    assert rgb(img, (5, 5)) == (1, 2, 3)


def test_path_nodes_are_marked() -> None:
    img = render(make_grid("...", "..."), path=[(0, 0), (1, 1)], resolution=60)
    assert img.getpixel((10, 10)) == PATH_NODE_COLOR
    assert img.getpixel((30, 30)) == PATH_NODE_COLOR
    assert img.getpixel((50, 10)) != PATH_NODE_COLOR


def test_highlight_outline() -> None:
    img = render(make_grid("..", ".."), highlight=(1, 0), resolution=40)
    assert img.getpixel((22, 10)) == HIGHLIGHT_COLOR
    assert img.getpixel((2, 10)) != HIGHLIGHT_COLOR


def test_out_of_bounds_highlight_ignored() -> None:
    grid = make_grid("..")
    assert render(grid, highlight=(5, 5)).tobytes() == render(grid).tobytes()


def test_ferries_can_be_hidden() -> None:
    grid = make_grid("....")
    ferry = Ferry(origin=(0, 0), destination=(3, 0), cost=1)
    shown = render(grid, [ferry], resolution=40)
    hidden = MapRenderer(resolution=40, show_ferries=False).render(grid, [ferry])
    assert shown.getpixel((8, 5)) == FERRY_COLOR
    assert hidden.getpixel((8, 5)) != FERRY_COLOR


def test_ferry_with_out_of_bounds_end_not_drawn() -> None:
    grid = make_grid("....")
    ferry = Ferry(origin=(0, 0), destination=(9, 0), cost=1)
    assert render(grid, [ferry]).tobytes() == render(grid).tobytes()


def test_terrain_color_array_shape() -> None:
    arr = terrain_color_array((("plains", "sea"),), DEFAULT_PALETTE)
    assert arr.shape == (1, 2, 4)
    assert tuple(arr[0, 1]) == (*DEFAULT_PALETTE[TerrainKind.SEA], 255)


def test_upscale_cells() -> None:
    arr = terrain_color_array((("plains",), ("sea",)), DEFAULT_PALETTE)
    img = upscale_cells(arr, 4)
    assert img.size == (4, 8)
    assert rgb(img, (3, 7)) == DEFAULT_PALETTE[TerrainKind.SEA]


def test_dashed_line_leaves_gaps() -> None:
    img = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
    draw_dashed_line(ImageDraw.Draw(img), (0, 10), (19, 10), FERRY_COLOR, width=1)
    assert img.getpixel((3, 10)) == FERRY_COLOR
    assert img.getpixel((8, 10)) == (0, 0, 0, 0)
