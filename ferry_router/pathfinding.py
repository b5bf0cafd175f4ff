"""Shortest-path search over a terrain grid with ferries.

The graph is implicit: nodes are grid cells, and each popped cell is expanded
into

* up to eight neighbour moves (orthogonal and diagonal alike), each weighted by
  the destination cell's terrain cost, and
* every ferry departing that cell, weighted by the ferry's own cost. The
  destination's terrain is not consulted for a ferry hop.

The frontier is a binary heap of ``(cost, seq, cell)`` entries. ``seq`` is a
monotonically increasing counter, so entries with equal cost pop in insertion
order and results are reproducible. Improved costs push a fresh entry instead
of updating the old one; outdated entries are skipped when popped.

Relaxation uses a strict ``<``: when a ferry and a grid move (or two ferries)
reach a cell at the same cost, the predecessor found first is kept. Which one
that is follows from the expansion order (neighbours in ``NEIGHBOR_OFFSETS``
order, then ferries in input order) and carries no meaning beyond that.

Failures are returned in :class:`PathResult` rather than raised so callers can
tell a bad request apart from an unreachable destination.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ferry_router.ferry import Ferry, FerryIndex, ferries_from, index_ferries
from ferry_router.grid import TerrainGrid
from ferry_router.types import IMPASSABLE, Coord, PathError, TerrainCost

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS: Tuple[Coord, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)

ERROR_MESSAGES: Dict[PathError, str] = {
    PathError.EMPTY_GRID: "Empty map",
    PathError.OUT_OF_BOUNDS: "Start or end out of bounds",
    PathError.IMPASSABLE_ENDPOINT: "Start or end tile is impassable (void)",
    PathError.NO_PATH: "No valid path found",
    PathError.EXPANSION_LIMIT: "Search budget exhausted before reaching the end",
}


@dataclass(frozen=True)
class PathResult:
    """Outcome of :func:`find_path`.

    Attributes:
        cost: Total cost of ``path``; ``None`` on failure.
        path: Cells from start to end inclusive; empty on failure.
        error: Failure kind, or ``None`` on success.
        message: Human-readable description of ``error``.
        expanded: Number of cells settled by the search.
    """

    cost: Optional[int] = None
    path: Tuple[Coord, ...] = ()
    error: Optional[PathError] = None
    message: Optional[str] = None
    expanded: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def _failure(
    error: PathError, message: Optional[str] = None, expanded: int = 0
) -> PathResult:
    return PathResult(
        error=error,
        message=message or ERROR_MESSAGES[error],
        expanded=expanded,
    )


def as_cell(value: Any) -> Optional[Coord]:
    """Return ``value`` as an ``(x, y)`` pair of ints, or ``None``.

    Integral floats such as ``2.0`` are accepted; fractional, non-finite or
    non-numeric components are not.
    """
    try:
        x, y = value
        ix, iy = int(x), int(y)
    except (TypeError, ValueError, OverflowError):
        return None
    if ix != x or iy != y:
        return None
    return ix, iy


def _validate(
    grid: TerrainGrid, start: Optional[Coord], end: Optional[Coord]
) -> Optional[PathResult]:
    """Return a failure result for an invalid request, else ``None``."""
    if grid.is_empty():
        return _failure(PathError.EMPTY_GRID)
    if start is None or end is None:
        return _failure(PathError.OUT_OF_BOUNDS)
    if not grid.in_bounds(start) or not grid.in_bounds(end):
        return _failure(PathError.OUT_OF_BOUNDS)
    if grid.cost_at(start) == IMPASSABLE:
        return _failure(
            PathError.IMPASSABLE_ENDPOINT, "Start tile is impassable (void)"
        )
    if grid.cost_at(end) == IMPASSABLE:
        return _failure(PathError.IMPASSABLE_ENDPOINT, "End tile is impassable (void)")
    return None


def _reconstruct(came_from: Dict[Coord, Coord], end: Coord) -> Tuple[Coord, ...]:
    path = [end]
    current = end
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return tuple(path)


def find_path(
    grid: TerrainGrid,
    ferries: Sequence[Ferry],
    start: Coord,
    end: Coord,
    max_expansions: Optional[int] = None,
) -> PathResult:
    """Find a minimum-cost route from ``start`` to ``end``.

    Args:
        grid: Terrain to search. Not modified.
        ferries: Directed shortcut edges. Ferries whose destination lies
            outside ``grid`` are ignored. Not modified.
        start: Starting cell ``(x, y)``.
        end: Target cell ``(x, y)``.
        max_expansions: Optional cap on the number of settled cells. When
            reached before ``end`` is settled the result carries
            ``PathError.EXPANSION_LIMIT``.

    Returns:
        PathResult: ``cost`` and ``path`` on success, otherwise ``error`` set
            to one of the :class:`PathError` kinds. Request problems are checked
            in order: empty grid, out-of-bounds endpoint, impassable endpoint.
            Endpoints that are not integral ``(x, y)`` pairs count as out of
            bounds.
    """
    source, target = as_cell(start), as_cell(end)
    invalid = _validate(grid, source, target)
    if invalid is not None:
        logger.debug("Rejected search %s -> %s: %s", start, end, invalid.error)
        return invalid
    assert source is not None and target is not None
    start, end = source, target

    if start == end:
        return PathResult(cost=0, path=(start,))

    ferry_index = index_ferries(ferries)

    best: Dict[Coord, TerrainCost] = {start: 0}
    came_from: Dict[Coord, Coord] = {}
    seq = 0
    frontier: List[Tuple[TerrainCost, int, Coord]] = [(0, seq, start)]
    expanded = 0

    while frontier:
        cost, _, current = heapq.heappop(frontier)
        if cost > best.get(current, IMPASSABLE):
            continue  # stale

        if current == end:
            path = _reconstruct(came_from, end)
            logger.debug(
                "Found path %s -> %s: cost=%s steps=%d expanded=%d",
                start,
                end,
                cost,
                len(path) - 1,
                expanded,
            )
            return PathResult(cost=int(cost), path=path, expanded=expanded)

        if max_expansions is not None and expanded >= max_expansions:
            logger.debug("Search %s -> %s hit budget %d", start, end, max_expansions)
            return _failure(PathError.EXPANSION_LIMIT, expanded=expanded)
        expanded += 1

        x, y = current
        candidates: List[Tuple[Coord, TerrainCost]] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = (x + dx, y + dy)
            if not grid.in_bounds(neighbor):
                continue
            step_cost = grid.cost_at(neighbor)
            if step_cost == IMPASSABLE:
                continue
            candidates.append((neighbor, step_cost))

        for ferry in ferries_from(ferry_index, current):
            if not grid.in_bounds(ferry.destination):
                continue
            candidates.append((ferry.destination, ferry.cost))

        for neighbor, step_cost in candidates:
            new_cost = cost + step_cost
            if new_cost < best.get(neighbor, IMPASSABLE):
                best[neighbor] = new_cost
                came_from[neighbor] = current
                seq += 1
                heapq.heappush(frontier, (new_cost, seq, neighbor))

    logger.debug("No path %s -> %s after %d expansions", start, end, expanded)
    return _failure(PathError.NO_PATH, expanded=expanded)


def is_grid_move(a: Coord, b: Coord) -> bool:
    """True if ``b`` is one of the eight neighbours of ``a``."""
    return a != b and max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1


def _step_cost(
    grid: TerrainGrid, ferry_index: FerryIndex, a: Coord, b: Coord
) -> Optional[int]:
    options: List[TerrainCost] = []
    if is_grid_move(a, b) and grid.in_bounds(b):
        terrain = grid.cost_at(b)
        if terrain != IMPASSABLE:
            options.append(terrain)
    if grid.in_bounds(b):
        options.extend(
            ferry.cost
            for ferry in ferries_from(ferry_index, a)
            if ferry.destination == b
        )
    if not options:
        return None
    return int(min(options))


def step_cost(
    grid: TerrainGrid, ferries: Sequence[Ferry], a: Coord, b: Coord
) -> Optional[int]:
    """Cheapest single-step cost from ``a`` to ``b``, or ``None`` if not connected.

    A step is either a grid move onto a passable in-bounds neighbour or a ferry
    hop from ``a`` to an in-bounds ``b``.
    """
    return _step_cost(grid, index_ferries(ferries), tuple(a), tuple(b))


def path_cost(
    grid: TerrainGrid, ferries: Sequence[Ferry], path: Sequence[Coord]
) -> int:
    """Recompute the total cost of ``path`` step by step.

    Raises:
        ValueError: If ``path`` is empty or two consecutive cells are joined
            by neither a grid move nor a ferry.
    """
    if not path:
        raise ValueError("Path is empty")
    ferry_index = index_ferries(ferries)
    total = 0
    for a, b in zip(path, path[1:]):
        cost = _step_cost(grid, ferry_index, tuple(a), tuple(b))
        if cost is None:
            raise ValueError(f"No grid move or ferry connects {a} to {b}")
        total += cost
    return total
