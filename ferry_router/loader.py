"""Map and ferry loading.

Maps are JSON documents holding a list of rows, each row a list of terrain
labels. Ferry files are JSON lists whose records come in several shapes seen
in exported data:

* ``{"origin": [x, y], "destination": [x, y], "cost": n}`` (canonical),
* flat spreadsheet-style keys such as
  ``{"origin X": 1, "origin Y": 2, "destination X": 3, "destination Y": 4,
  "cost required": 5}``.

Flat keys are matched after removing whitespace and lower-casing, so
``"Origin X"``, ``"origin_x"``, ``"origin[0]"`` and ``"originx"`` are all
accepted; a null value falls through to the next spelling. Numeric
values are truncated to ``int``; anything non-numeric becomes ``0``. Records
lacking any coordinate are skipped.
"""

import json
import logging
import math
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from ferry_router.ferry import Ferry
from ferry_router.grid import TerrainGrid
from ferry_router.types import Coord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ORIGIN_X_KEYS = (
    "origin x",
    "originx",
    "origin_x",
    "origin0",
    "ox",
    "origin[0]",
    "origin_0",
)
ORIGIN_Y_KEYS = (
    "origin y",
    "originy",
    "origin_y",
    "origin1",
    "oy",
    "origin[1]",
    "origin_1",
)
DESTINATION_X_KEYS = (
    "destination x",
    "destinationx",
    "destination_x",
    "destx",
    "dx",
    "destination[0]",
    "destination_0",
)
DESTINATION_Y_KEYS = (
    "destination y",
    "destinationy",
    "destination_y",
    "desty",
    "dy",
    "destination[1]",
    "destination_1",
)
COST_KEYS = (
    "cost required",
    "costrequired",
    "cost",
    "cost_ap_required",
    "costaprequired",
    "c",
)


class MapLoadError(ValueError):
    """Raised when a map file is missing, unreadable or not a list of rows."""


def int_or_zero(value: Any) -> int:
    """Truncate ``value`` to ``int``; non-numeric or non-finite values give 0."""
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(number)


def _squash(key: str) -> str:
    return re.sub(r"\s+", "", key).lower()


def pick_field(record: Mapping[str, Any], candidates: Iterable[str]) -> Any:
    """Return the first non-null value whose normalized key matches a candidate."""
    normalized = {_squash(str(k)): v for k, v in record.items()}
    for candidate in candidates:
        value = normalized.get(_squash(candidate))
        if value is not None:
            return value
    return None


def _first_cost(record: Mapping[str, Any]) -> Any:
    for key in ("cost", "c", "cost required", "costrequired"):
        if record.get(key) is not None:
            return record[key]
    return None


def _make_ferry(origin: Coord, destination: Coord, cost: int) -> Optional[Ferry]:
    if cost < 0:
        logger.debug(
            "Skipping ferry %s -> %s with negative cost %d", origin, destination, cost
        )
        return None
    return Ferry(origin=origin, destination=destination, cost=cost)


def normalize_ferry(record: Any) -> Optional[Ferry]:
    """Convert one raw ferry record into a :class:`Ferry`, or ``None``.

    Flat records missing a coordinate, or holding only nulls for one,
    are rejected, as are records with a negative cost. A missing or null
    cost is ``0``.
    """
    if not isinstance(record, Mapping):
        return None

    origin = record.get("origin")
    destination = record.get("destination")
    if isinstance(origin, Sequence) and not isinstance(origin, str):
        if isinstance(destination, Sequence) and not isinstance(destination, str):
            origin_xy = list(origin) + [None, None]
            dest_xy = list(destination) + [None, None]
            return _make_ferry(
                (int_or_zero(origin_xy[0]), int_or_zero(origin_xy[1])),
                (int_or_zero(dest_xy[0]), int_or_zero(dest_xy[1])),
                int_or_zero(_first_cost(record)),
            )

    ox = pick_field(record, ORIGIN_X_KEYS)
    oy = pick_field(record, ORIGIN_Y_KEYS)
    dx = pick_field(record, DESTINATION_X_KEYS)
    dy = pick_field(record, DESTINATION_Y_KEYS)
    if ox is None or oy is None or dx is None or dy is None:
        return None
    return _make_ferry(
        (int_or_zero(ox), int_or_zero(oy)),
        (int_or_zero(dx), int_or_zero(dy)),
        int_or_zero(pick_field(record, COST_KEYS)),
    )


def normalize_ferries(raw: Any) -> List[Ferry]:
    """Normalize a list of heterogeneous ferry records.

    Anything that is not a list yields an empty list; unrecognised records
    are dropped.
    """
    if not isinstance(raw, list):
        return []
    out: List[Ferry] = []
    for i, record in enumerate(raw):
        ferry = normalize_ferry(record)
        if ferry is None:
            logger.debug("Skipping unrecognised ferry record #%d: %r", i, record)
            continue
        out.append(ferry)
    return out


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_grid(path: PathLike) -> TerrainGrid:
    """Load a map JSON file into a :class:`TerrainGrid`.

    Raises:
        MapLoadError: If the file is missing, is not valid JSON or is not a
            list of rows.
        MalformedGridError: If rows have differing widths.
    """
    path = Path(path)
    try:
        raw = _read_json(path)
    except FileNotFoundError as e:
        raise MapLoadError(f"Map file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise MapLoadError(f"Failed to read map {path}: {e}") from e

    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise MapLoadError(f"Map {path} must be a JSON list of rows")

    grid = TerrainGrid.from_rows(raw)
    logger.info("Map loaded from %s: %d rows x %d cols", path, grid.height, grid.width)
    return grid


def load_ferries(path: Optional[PathLike]) -> List[Ferry]:
    """Load and normalize a ferry JSON file.

    A missing file is not an error: a warning is logged and no ferries are
    returned. A file that exists but cannot be parsed raises
    :class:`MapLoadError`.
    """
    if path is None:
        return []
    path = Path(path)
    if not path.is_file():
        logger.warning("Ferry file %s not found, proceeding with no ferries", path)
        return []
    try:
        raw = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise MapLoadError(f"Failed to read ferries {path}: {e}") from e

    ferries = normalize_ferries(raw)
    logger.info("Ferries loaded from %s: %d", path, len(ferries))
    return ferries
