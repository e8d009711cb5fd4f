"""Config -- load planner parameters from YAML files.

Map size, house and tree counts, the RNG seed and output options live in
YAML and are parsed into a typed dataclass here.  Command-line arguments
override whatever the file provides.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class PlannerConfig:
    """Top-level planner configuration.

    Attributes:
        seed: RNG seed for reproducible maps.  ``None`` draws fresh OS
            entropy on every run.
        width: Number of map columns.
        height: Number of map rows.
        houses: Number of house placements drawn.
        trees: Number of tree placements drawn.
        show_distances: Annotate rendered cells with their distance.
        show_costs: Also print the per-candidate cost table.
    """

    seed: int | None = None
    width: int = 40
    height: int = 25
    houses: int = 8
    trees: int = 128
    show_distances: bool = False
    show_costs: bool = False

    @classmethod
    def from_yaml(cls, path: str | Path) -> PlannerConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated PlannerConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the file is not a mapping or a value has the
                wrong type or range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping, got {type(data).__name__}"
            raise ValueError(msg)

        seed = data.get("seed", cls.seed)
        if seed is not None:
            seed = _int_field(data, "seed", 0)

        return cls(
            seed=seed,
            width=_int_field(data, "width", 1, cls.width),
            height=_int_field(data, "height", 1, cls.height),
            houses=_int_field(data, "houses", 1, cls.houses),
            trees=_int_field(data, "trees", 0, cls.trees),
            show_distances=_bool_field(data, "show_distances", cls.show_distances),
            show_costs=_bool_field(data, "show_costs", cls.show_costs),
        )


def _int_field(
    data: dict[str, object],
    key: str,
    minimum: int,
    default: int = 0,
) -> int:
    """Return ``data[key]`` as an int no smaller than ``minimum``."""
    value = data.get(key, default)
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{key} must be an integer, got {value!r}"
        raise ValueError(msg)
    if value < minimum:
        msg = f"{key} must be at least {minimum}, got {value}"
        raise ValueError(msg)
    return value


def _bool_field(data: dict[str, object], key: str, default: bool) -> bool:
    """Return ``data[key]`` as a bool."""
    value = data.get(key, default)
    if not isinstance(value, bool):
        msg = f"{key} must be true or false, got {value!r}"
        raise ValueError(msg)
    return value
