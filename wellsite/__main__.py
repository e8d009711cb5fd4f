"""Entry point for ``python -m wellsite``.

Generates a random map of the requested size, finds the best spot for a
well and prints the map with paths from every house.

Example::

    python -m wellsite 40x25 8 128
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib
import sys
from collections.abc import Callable

import yaml

from wellsite.planner.config import PlannerConfig
from wellsite.planner.engine import SitePlanner
from wellsite.search.facility import InvalidConfigurationError
from wellsite.search.paths import PathReconstructionError

logger = logging.getLogger("wellsite")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

NO_PLACEMENT_MESSAGE = "Could not place a well. Too many trees?"


def map_size(value: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a pair of positive ints."""
    try:
        width_text, height_text = value.lower().split("x")
        width, height = int(width_text), int(height_text)
    except ValueError:
        msg = f"invalid map size {value!r}, expected WIDTHxHEIGHT such as 10x5"
        raise argparse.ArgumentTypeError(msg) from None
    if width < 1 or height < 1:
        msg = f"map size must be at least 1x1, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return width, height


def _count(minimum: int) -> Callable[[str], int]:
    """Return an argparse type that accepts ints >= ``minimum``."""

    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            msg = f"invalid count {value!r}"
            raise argparse.ArgumentTypeError(msg) from None
        if number < minimum:
            msg = f"count must be at least {minimum}, got {number}"
            raise argparse.ArgumentTypeError(msg)
        return number

    return parse


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="wellsite",
        description="Find the best spot for a village well among houses and trees",
        epilog="Example: python -m wellsite 10x5 4 3",
    )
    parser.add_argument("size", type=map_size, help="Map size as WIDTHxHEIGHT")
    parser.add_argument("houses", type=_count(1), help="Number of houses to place")
    parser.add_argument("trees", type=_count(0), help="Number of trees to place")
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml if present)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for a reproducible map",
    )
    parser.add_argument(
        "--distances",
        action="store_true",
        help="Show each cell's distance from the well",
    )
    parser.add_argument(
        "--costs",
        action="store_true",
        help="Also print the total distance for every candidate cell",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log search progress to stderr",
    )
    return parser


def load_config(args: argparse.Namespace) -> PlannerConfig:
    """Merge the YAML config (if any) with command-line overrides."""
    if args.config is not None:
        config = PlannerConfig.from_yaml(args.config)
    elif _DEFAULT_CONFIG.is_file():
        config = PlannerConfig.from_yaml(_DEFAULT_CONFIG)
    else:
        config = PlannerConfig()

    width, height = args.size
    overrides: dict[str, object] = {
        "width": width,
        "height": height,
        "houses": args.houses,
        "trees": args.trees,
    }
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.distances:
        overrides["show_distances"] = True
    if args.costs:
        overrides["show_costs"] = True
    return dataclasses.replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, place the well, print the map."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        planner = SitePlanner(config=load_config(args))
    except (OSError, yaml.YAMLError, ValueError, TypeError) as exc:
        print(f"Could not read config: {exc}", file=sys.stderr)
        return 1

    try:
        report = planner.run()
    except InvalidConfigurationError as exc:
        print(f"Invalid map: {exc}", file=sys.stderr)
        return 1
    except PathReconstructionError:
        logger.exception("path reconstruction failed")
        return 1

    if not report.placed:
        print(NO_PLACEMENT_MESSAGE)
    print(planner.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
