"""Command line entry point: solve a puzzle map file.

    parking-search maps/tokyo1.map --mutator tail --seed 1
    parking-search --example traffic_jam

Prints the puzzle, searches within the given budgets and prints the solving
moves. Exits with status 1 if no solution was found.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from parking_search.config import SearchConfig
from parking_search.errors import ConfigurationError
from parking_search.examples import EXAMPLE_MAPS
from parking_search.levels import format_moves, parse_named_map, render
from parking_search.mutators import MUTATOR_REGISTRY
from parking_search.search import solve, verify_solution
from parking_search.utils.coordinate import COORDINATE_TYPES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parking-search",
        description="Search for a move sequence solving a sliding-car puzzle.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("map", nargs="?", type=Path, help="Path to a map file.")
    source.add_argument(
        "--example", choices=sorted(EXAMPLE_MAPS), help="Solve a built-in puzzle."
    )
    parser.add_argument(
        "--mutator", choices=sorted(MUTATOR_REGISTRY), default="tail"
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument(
        "--time-budget", type=float, default=None, help="Seconds before giving up."
    )
    parser.add_argument(
        "--coordinate", choices=sorted(COORDINATE_TYPES), default="uint8"
    )
    parser.add_argument(
        "--no-snapshots",
        action="store_true",
        help="Always replay candidates from the initial configuration.",
    )
    parser.add_argument("--log-interval", type=int, default=10000)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    text = EXAMPLE_MAPS[args.example] if args.example else args.map.read_text()
    try:
        config = SearchConfig(
            mutator=args.mutator,
            seed=args.seed,
            max_iterations=args.max_iterations,
            time_budget=args.time_budget,
            snapshots=not args.no_snapshots,
            coordinate=args.coordinate,
            log_interval=args.log_interval,
        )
        initial, names = parse_named_map(text, coordinate=config.coordinate)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    print("Attempting to solve:")
    print(render(initial, names))

    result = solve(initial, config)
    if not result.found:
        print(f"No solution found after {result.stats.executions} executions.")
        return 1

    assert verify_solution(initial, result.moves)
    print(f"{len(result.moves)} moves: {format_moves(result.moves, names)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
