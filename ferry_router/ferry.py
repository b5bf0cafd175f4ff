"""Ferry (directed shortcut edge) model.

A :class:`Ferry` links an origin cell to a destination cell with a fixed cost
that replaces the destination's terrain cost for that hop. Ferries are
one-way; a return trip needs its own record.

The search looks ferries up by origin through :func:`index_ferries`, which
groups a ferry sequence into a persistent map. Each search builds its own
index; nothing is kept between calls.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from ferry_router.types import Coord


@dataclass(frozen=True)
class Ferry:
    """Directed auxiliary edge.

    Attributes:
        origin: Cell the ferry departs from. Stored as a tuple.
        destination: Cell the ferry arrives at. May lie outside a given grid,
            in which case the ferry is ignored by searches on that grid.
        cost: Non-negative cost of the hop.

    Raises:
        ValueError: If ``cost`` is negative.
    """

    origin: Coord
    destination: Coord
    cost: int = 0

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Ferry cost must be non-negative, got {self.cost}")
        object.__setattr__(self, "origin", tuple(self.origin))
        object.__setattr__(self, "destination", tuple(self.destination))


FerryIndex = PMap[Coord, PVector[Ferry]]


def index_ferries(ferries: Sequence[Ferry]) -> FerryIndex:
    """Group ``ferries`` by origin, keeping their input order within a group."""
    grouped: Dict[Coord, List[Ferry]] = {}
    for ferry in ferries:
        grouped.setdefault(ferry.origin, []).append(ferry)
    return pmap({origin: pvector(group) for origin, group in grouped.items()})


def ferries_from(index: FerryIndex, cell: Coord) -> PVector[Ferry]:
    """Ferries departing ``cell`` (empty vector if none)."""
    return index.get(cell, pvector())
