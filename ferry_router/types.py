"""Common type aliases and enumerations.

``Coord`` is the ``(x, y)`` cell address used everywhere in the package: ``x``
is the column index and ``y`` the row index, both counted from the top-left.
"""

import math
from enum import StrEnum, auto
from typing import Tuple, Union

Coord = Tuple[int, int]

TerrainCost = Union[int, float]

# Sentinel for cells that can never be entered by a grid move. Compares larger
# than any finite accumulated cost.
IMPASSABLE: float = math.inf


class TerrainKind(StrEnum):
    """Terrain categories derived from a cell label."""

    VOID = auto()
    MOUNTAIN = auto()
    SEA = auto()
    PLAINS = auto()


class PathError(StrEnum):
    """Failure kinds reported in :class:`ferry_router.pathfinding.PathResult`.

    ``EMPTY_GRID``, ``OUT_OF_BOUNDS`` and ``IMPASSABLE_ENDPOINT`` describe a bad
    request. ``NO_PATH`` is the normal negative outcome for disconnected cells
    and ``EXPANSION_LIMIT`` means an explicit search budget ran out.
    """

    EMPTY_GRID = auto()
    OUT_OF_BOUNDS = auto()
    IMPASSABLE_ENDPOINT = auto()
    NO_PATH = auto()
    EXPANSION_LIMIT = auto()
