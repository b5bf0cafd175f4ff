import pytest

from ferry_router.grid import MalformedGridError, TerrainGrid
from ferry_router.types import IMPASSABLE
from tests.test_utils import make_grid


def test_dimensions_follow_first_row() -> None:
    grid = make_grid("...", "~^#")
    assert grid.width == 3
    assert grid.height == 2
    assert not grid.is_empty()


@pytest.mark.parametrize("rows", [[], [[]], [[], []]])
def test_empty_grids(rows: list) -> None:
    grid = TerrainGrid.from_rows(rows)
    assert grid.is_empty()


def test_default_grid_is_empty() -> None:
    assert TerrainGrid().is_empty()
    assert TerrainGrid().width == 0


def test_ragged_rows_rejected() -> None:
    with pytest.raises(MalformedGridError, match="Row 1"):
        TerrainGrid.from_rows([["plains", "sea"], ["plains"]])


def test_malformed_grid_error_is_value_error() -> None:
    assert issubclass(MalformedGridError, ValueError)


def test_non_string_labels_are_stringified() -> None:
    grid = TerrainGrid.from_rows([[None, 7, "Sea"]])
    assert grid.rows == (("", "7", "Sea"),)
    assert grid.label_at((2, 0)) == "Sea"


@pytest.mark.parametrize(
    "cell, inside",
    [
        ((0, 0), True),
        ((2, 1), True),
        ((3, 0), False),
        ((0, 2), False),
        ((-1, 0), False),
        ((0, -1), False),
    ],
)
def test_in_bounds(cell: tuple, inside: bool) -> None:
    assert make_grid("...", "...").in_bounds(cell) is inside


def test_cost_at_uses_terrain_rules() -> None:
    grid = make_grid(".^~#")
    assert [grid.cost_at((x, 0)) for x in range(4)] == [1, 2, 2, IMPASSABLE]


def test_grid_is_hashable_value() -> None:
    a = make_grid("..", "~~")
    b = make_grid("..", "~~")
    assert a == b
    assert len({a, b}) == 1


def test_constructor_freezes_list_rows() -> None:
    grid = TerrainGrid(rows=[["plains", "sea"]])  # type: ignore[arg-type]
    assert grid.rows == (("plains", "sea"),)
    assert grid.cost_at((1, 0)) == 2
    assert hash(grid) == hash(TerrainGrid.from_rows([["plains", "sea"]]))


def test_constructor_rejects_ragged_rows() -> None:
    with pytest.raises(MalformedGridError):
        TerrainGrid(rows=[["plains"], []])  # type: ignore[arg-type]


def test_cost_table_built_once() -> None:
    grid = make_grid(".^", "~#")
    assert grid.costs == ((1, 2), (2, IMPASSABLE))
    assert "costs" not in repr(grid)
