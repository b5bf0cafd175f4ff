"""ferry_router: minimum-cost routes over terrain grids with one-way ferries.

The two entry points most callers need are :func:`cost_of`, which classifies a
terrain label, and :func:`find_path`, which runs the search. Grids and ferry
lists are plain immutable values supplied on every call; the package keeps no
state between searches.
"""

from ferry_router.cost import cost_of, is_passable, terrain_kind
from ferry_router.ferry import Ferry
from ferry_router.grid import MalformedGridError, TerrainGrid
from ferry_router.pathfinding import PathResult, find_path, path_cost
from ferry_router.types import IMPASSABLE, Coord, PathError, TerrainKind

__all__ = [
    "IMPASSABLE",
    "Coord",
    "Ferry",
    "MalformedGridError",
    "PathError",
    "PathResult",
    "TerrainGrid",
    "TerrainKind",
    "cost_of",
    "find_path",
    "is_passable",
    "path_cost",
    "terrain_kind",
]
