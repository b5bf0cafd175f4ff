"""Command line entry point.

Examples::

    ferry-router route --example archipelago --start 0,0 --end 16,0
    ferry-router route --map map.json --ferries ferry.json --start 1,2 --end 8,3 \\
        --image route.png
    ferry-router classify "Deep Sea" void_rift hills

Exit status: 0 on success, 1 when the search fails (any ``PathError``), 2 for
unusable input (bad arguments, unreadable or malformed map).
"""

import argparse
from dataclasses import replace
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from ferry_router.config import Config, configure_logging, load_config
from ferry_router.cost import cost_of, terrain_kind
from ferry_router.examples import EXAMPLE_REGISTRY
from ferry_router.ferry import Ferry
from ferry_router.grid import MalformedGridError, TerrainGrid
from ferry_router.loader import MapLoadError, load_ferries, load_grid
from ferry_router.pathfinding import PathResult, find_path
from ferry_router.renderer import MapRenderer
from ferry_router.types import Coord

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_ROUTE = 1
EXIT_BAD_INPUT = 2


def parse_coord(text: str) -> Coord:
    """Parse ``"x,y"`` into a coordinate pair."""
    parts = text.replace(" ", "").split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"coordinates must be integers: {text!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ferry-router",
        description="Minimum-cost routes over terrain grids with ferries",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--log-level", help="Override the configured global log level (e.g. DEBUG)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="Find the cheapest route between two cells")
    source = route.add_mutually_exclusive_group()
    source.add_argument("--map", dest="map_path", help="Map JSON file")
    source.add_argument(
        "--example",
        choices=sorted(EXAMPLE_REGISTRY),
        help="Use a built-in example map instead of a file",
    )
    route.add_argument("--ferries", dest="ferry_path", help="Ferry JSON file")
    route.add_argument("--start", type=parse_coord, required=True, help="X,Y")
    route.add_argument("--end", type=parse_coord, required=True, help="X,Y")
    route.add_argument(
        "--max-expansions", type=int, help="Give up after settling this many cells"
    )
    route.add_argument("--image", help="Write a PNG of the map and route here")

    classify = sub.add_parser("classify", help="Show the cost of terrain labels")
    classify.add_argument("labels", nargs="+")

    return parser


def _load_inputs(
    args: argparse.Namespace, config: Config
) -> Tuple[TerrainGrid, List[Ferry]]:
    if args.example:
        return EXAMPLE_REGISTRY[args.example]()
    map_path = args.map_path or config.router.map_path
    if map_path is None:
        raise MapLoadError("No map given: pass --map, --example or set router.map_path")
    grid = load_grid(map_path)
    ferries = load_ferries(args.ferry_path or config.router.ferry_path)
    return grid, ferries


def format_result(result: PathResult) -> str:
    if not result.ok:
        return f"Error: {result.message}"
    cells = " -> ".join(f"({x},{y})" for x, y in result.path)
    return f"Total Cost: {result.cost} AP\n{cells}"


def _run_route(args: argparse.Namespace, config: Config) -> int:
    try:
        grid, ferries = _load_inputs(args, config)
    except (MapLoadError, MalformedGridError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    max_expansions = (
        args.max_expansions
        if args.max_expansions is not None
        else config.router.max_expansions
    )
    result = find_path(grid, ferries, args.start, args.end, max_expansions)
    print(format_result(result))

    if args.image:
        renderer = MapRenderer(
            resolution=config.render.resolution,
            show_ferries=config.render.show_ferries,
        )
        renderer.render(grid, ferries, path=result.path).save(args.image)
        logger.info("Wrote route image to %s", args.image)

    return EXIT_OK if result.ok else EXIT_NO_ROUTE


def _run_classify(args: argparse.Namespace) -> int:
    for label in args.labels:
        print(f"{label}\t{terrain_kind(label)}\t{cost_of(label)}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValueError, OSError) as e:
        print(f"Error: failed to load config: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logging_config = config.logging
    if args.log_level:
        logging_config = replace(logging_config, global_level=args.log_level.upper())
    configure_logging(logging_config)

    if args.command == "route":
        return _run_route(args, config)
    return _run_classify(args)


if __name__ == "__main__":
    sys.exit(main())
