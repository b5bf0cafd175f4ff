"""Terrain cost model.

A cell label is an opaque string; its cost is decided by case-insensitive
substring rules checked in order, first match wins. ``void`` comes first so
that a label such as ``"void_mountain"`` stays impassable.
"""

from typing import Any, List, Tuple

from ferry_router.types import IMPASSABLE, TerrainCost, TerrainKind

# Ordered from most to least specific
TERRAIN_RULES: List[Tuple[str, TerrainKind]] = [
    ("void", TerrainKind.VOID),
    ("mountain", TerrainKind.MOUNTAIN),
    ("sea", TerrainKind.SEA),
]

TERRAIN_COSTS: dict[TerrainKind, TerrainCost] = {
    TerrainKind.VOID: IMPASSABLE,
    TerrainKind.MOUNTAIN: 2,
    TerrainKind.SEA: 2,
    TerrainKind.PLAINS: 1,
}


def normalize_label(label: Any) -> str:
    """Lower-case string form of ``label``; ``None`` maps to ``""``."""
    if label is None:
        return ""
    return str(label).lower()


def terrain_kind(label: Any) -> TerrainKind:
    """Classify ``label`` into a :class:`TerrainKind`.

    Never fails: unrecognised labels (including the empty string) are plains.
    """
    text = normalize_label(label)
    for keyword, kind in TERRAIN_RULES:
        if keyword in text:
            return kind
    return TerrainKind.PLAINS


def cost_of(label: Any) -> TerrainCost:
    """Return the cost of stepping onto a cell with ``label``.

    Returns ``IMPASSABLE`` (``math.inf``) for void terrain and a small positive
    integer otherwise.
    """
    return TERRAIN_COSTS[terrain_kind(label)]


def is_passable(label: Any) -> bool:
    return cost_of(label) != IMPASSABLE
