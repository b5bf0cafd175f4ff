"""Built-in example maps.

``archipelago`` is a small hand-authored map: two landmasses separated by sea
and a void rift, joined by ferries in both directions. ``random_islands``
produces seeded maps of arbitrary size for demos and property tests.
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Tuple

from ferry_router.ferry import Ferry
from ferry_router.grid import TerrainGrid

Example = Tuple[TerrainGrid, List[Ferry]]

# Legend used by the hand-authored layout below
_LEGEND: Dict[str, str] = {
    ".": "plains",
    "^": "mountain",
    "~": "sea",
    "#": "void",
}

_ARCHIPELAGO_LAYOUT = [
    "..^^..#~~~~~.....",
    ".^^^..#~~~~~..^..",
    "......#~~~~~.^^^.",
    "..~~..#~~~~~.....",
    "..~~..#######....",
    "......#~~~~~...^.",
    ".^....#~~~~~.....",
    "......#~~~~~..~~.",
]


def archipelago() -> Example:
    """Two landmasses split by a void rift; only ferries cross it."""
    grid = TerrainGrid.from_rows(
        [[_LEGEND[ch] for ch in line] for line in _ARCHIPELAGO_LAYOUT]
    )
    ferries = [
        Ferry(origin=(5, 2), destination=(12, 2), cost=3),
        Ferry(origin=(12, 6), destination=(5, 6), cost=4),
        Ferry(origin=(0, 0), destination=(16, 7), cost=10),
    ]
    return grid, ferries


def random_islands(
    width: int = 20,
    height: int = 15,
    sea_fraction: float = 0.3,
    mountain_fraction: float = 0.1,
    void_fraction: float = 0.05,
    num_ferries: int = 4,
    seed: Optional[int] = None,
) -> Example:
    """Generate a seeded random map with ferries between random cells.

    Fractions are per-cell probabilities checked in order void, sea, mountain;
    the remainder is plains. Ferry costs are drawn from ``1..5``.
    """
    rng = random.Random(seed)
    rows: List[List[str]] = []
    for _ in range(height):
        row: List[str] = []
        for _ in range(width):
            roll = rng.random()
            if roll < void_fraction:
                row.append("void")
            elif roll < void_fraction + sea_fraction:
                row.append("sea")
            elif roll < void_fraction + sea_fraction + mountain_fraction:
                row.append("mountain")
            else:
                row.append("plains")
        rows.append(row)

    ferries = [
        Ferry(
            origin=(rng.randrange(width), rng.randrange(height)),
            destination=(rng.randrange(width), rng.randrange(height)),
            cost=rng.randint(1, 5),
        )
        for _ in range(num_ferries if width and height else 0)
    ]
    return TerrainGrid.from_rows(rows), ferries


EXAMPLE_REGISTRY: Dict[str, Callable[[], Example]] = {
    "archipelago": archipelago,
    "random": random_islands,
}
