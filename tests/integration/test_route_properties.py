import math

import pytest

from ferry_router.examples import archipelago, random_islands
from ferry_router.ferry import Ferry
from ferry_router.grid import TerrainGrid
from ferry_router.pathfinding import find_path, path_cost
from ferry_router.types import PathError
from tests.test_utils import make_grid, plains, reference_cost, step_costs


ISLAND = make_grid(
    ".....",
    ".###.",
    ".#.#.",
    ".###.",
    ".....",
)


@pytest.mark.parametrize("label", ["plains", "sea", "mountain", "grassland"])
def test_zero_length_path(label: str) -> None:
    grid = TerrainGrid.from_rows([[label, "plains"]])
    result = find_path(grid, [], (0, 0), (0, 0))
    assert result.cost == 0
    assert result.path == ((0, 0),)


def test_cost_consistency_on_archipelago() -> None:
    grid, ferries = archipelago()
    for start, end in [((2, 2), (12, 0)), ((12, 0), (2, 2)), ((0, 7), (16, 0))]:
        result = find_path(grid, ferries, start, end)
        assert result.ok
        assert sum(step_costs(grid, ferries, result.path)) == result.cost
        assert path_cost(grid, ferries, result.path) == result.cost


@pytest.mark.parametrize("seed", range(8))
def test_random_maps_match_reference(seed: int) -> None:
    grid, ferries = random_islands(width=9, height=7, num_ferries=3, seed=seed)
    start, end = (0, 0), (grid.width - 1, grid.height - 1)
    result = find_path(grid, ferries, start, end)
    if result.error == PathError.IMPASSABLE_ENDPOINT:
        return

    expected = reference_cost(grid, ferries, start, end)
    if expected is None:
        assert result.error == PathError.NO_PATH
        return
    assert result.cost == expected
    assert result.path[0] == start
    assert result.path[-1] == end
    assert path_cost(grid, ferries, result.path) == expected


@pytest.mark.parametrize("seed", range(4))
def test_costs_are_finite_and_non_negative(seed: int) -> None:
    grid, ferries = random_islands(width=6, height=6, void_fraction=0.0, seed=seed)
    result = find_path(grid, ferries, (0, 0), (5, 5))
    assert result.cost is not None
    assert result.cost >= 0
    assert math.isfinite(result.cost)


def test_isolated_cell_unreachable_both_ways() -> None:
    into = find_path(ISLAND, [], (0, 0), (2, 2))
    out_of = find_path(ISLAND, [], (2, 2), (4, 4))
    assert into.error == PathError.NO_PATH
    assert out_of.error == PathError.NO_PATH
    assert find_path(ISLAND, [], (2, 2), (2, 2)).cost == 0


def test_isolated_cell_reachable_by_ferry() -> None:
    ferry = Ferry(origin=(0, 0), destination=(2, 2), cost=7)
    result = find_path(ISLAND, [ferry], (0, 0), (2, 2))
    assert result.cost == 7
    assert result.path == ((0, 0), (2, 2))


def test_ferry_shortcut_beats_diagonal() -> None:
    grid = plains(3, 3)
    assert find_path(grid, [], (0, 0), (2, 2)).cost == 2

    ferry = Ferry(origin=(0, 0), destination=(2, 2), cost=1)
    result = find_path(grid, [ferry], (0, 0), (2, 2))
    assert result.cost == 1
    assert result.path == ((0, 0), (2, 2))


@pytest.mark.parametrize("width, height", [(1, 1), (3, 2), (17, 8)])
def test_bounds_rejection(width: int, height: int) -> None:
    grid = plains(width, height)
    result = find_path(grid, [], (0, 0), (width, 0))
    assert result.error == PathError.OUT_OF_BOUNDS
    assert result.cost is None


def test_ferry_does_not_imply_return_trip() -> None:
    grid = make_grid(
        "..#..",
        "..#..",
    )
    ferry = Ferry(origin=(1, 0), destination=(3, 1), cost=2)
    assert find_path(grid, [ferry], (0, 0), (4, 1)).ok
    assert find_path(grid, [ferry], (4, 1), (0, 0)).error == PathError.NO_PATH


@pytest.mark.parametrize("end", [(1, 0), (1, 1), (0, 1)])
def test_no_diagonal_surcharge(end) -> None:
    grid = make_grid(".^", "^^")
    result = find_path(grid, [], (0, 0), end)
    assert result.cost == 2
    assert len(result.path) == 2


def test_archipelago_crossings_use_ferries() -> None:
    grid, ferries = archipelago()

    east = find_path(grid, ferries, (2, 2), (12, 0))
    assert east.cost == 8
    assert ((5, 2), (12, 2)) in zip(east.path, east.path[1:])

    west = find_path(grid, ferries, (12, 0), (2, 2))
    assert west.ok
    assert ((12, 6), (5, 6)) in zip(west.path, west.path[1:])
    assert west.cost == reference_cost(grid, ferries, (12, 0), (2, 2))
