"""Terrain grid container.

``TerrainGrid`` is a frozen, row-major arrangement of terrain labels. Rows
are normalized to nested tuples on construction and the per-cell cost table
is computed once alongside them; nothing in the package ever mutates a grid
once built.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple

from ferry_router.cost import cost_of, normalize_label
from ferry_router.types import Coord, TerrainCost

Rows = Tuple[Tuple[str, ...], ...]
CostTable = Tuple[Tuple[TerrainCost, ...], ...]


class MalformedGridError(ValueError):
    """Raised when rows of a grid do not all have the same width."""


def _freeze_rows(rows: Iterable[Iterable[Any]]) -> Rows:
    return tuple(
        tuple(
            label if isinstance(label, str) else normalize_label(label)
            for label in row
        )
        for row in rows
    )


@dataclass(frozen=True)
class TerrainGrid:
    """Rectangular grid of terrain labels.

    Attributes:
        rows: ``rows[y][x]`` is the label of cell ``(x, y)``. Any nested
            iterable is accepted and stored as tuples. Labels are kept verbatim
            when they are strings; other values are stringified and ``None``
            becomes ``""``.
        costs: Terrain cost of every cell, derived from ``rows``.

    Raises:
        MalformedGridError: If any row differs in width from the first.
    """

    rows: Rows = ()
    costs: CostTable = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        frozen = _freeze_rows(self.rows)
        if frozen:
            width = len(frozen[0])
            for y, row in enumerate(frozen):
                if len(row) != width:
                    raise MalformedGridError(
                        f"Row {y} has width {len(row)}, expected {width}"
                    )
        object.__setattr__(self, "rows", frozen)
        object.__setattr__(
            self,
            "costs",
            tuple(tuple(cost_of(label) for label in row) for row in frozen),
        )

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> "TerrainGrid":
        """Build a grid from nested iterables, validating rectangularity."""
        return cls(rows=_freeze_rows(rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0

    def in_bounds(self, cell: Coord) -> bool:
        """Return True if ``cell`` lies within the grid rectangle."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def label_at(self, cell: Coord) -> str:
        x, y = cell
        return self.rows[y][x]

    def cost_at(self, cell: Coord) -> TerrainCost:
        """Terrain cost of ``cell``; the caller checks bounds first."""
        x, y = cell
        return self.costs[y][x]
