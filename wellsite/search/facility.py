"""Facility search -- choose the empty cell closest to every house.

Each empty cell is tried as a well site: distances are recomputed from it
and summed over all houses.  The smallest total wins; on equal totals the
first candidate in row-major order is kept.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from wellsite.map.cell import CellType
from wellsite.map.grid import Grid
from wellsite.search.propagation import propagate

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """The map has nothing to optimise, e.g. it contains no houses."""


@dataclass
class PlacementResult:
    """Outcome of a facility search.

    Attributes:
        x: Column of the chosen well, or -1 if none was found.
        y: Row of the chosen well, or -1 if none was found.
        total_distance: Sum of house distances to the well (``inf`` if
            none was found).
        costs: Per-cell candidate totals, ``inf`` where a cell was not a
            candidate or could not reach every house.
    """

    x: int = -1
    y: int = -1
    total_distance: float = math.inf
    costs: NDArray[np.float64] = field(
        default_factory=lambda: np.empty((0, 0), dtype=np.float64),
        repr=False,
    )

    @property
    def found(self) -> bool:
        """Return True if some candidate reached every house."""
        return self.total_distance != math.inf

    @property
    def position(self) -> tuple[int, int]:
        """Return ``(x, y)`` of the well."""
        return self.x, self.y


def total_distance(grid: Grid) -> float:
    """Sum the current distances of all houses.

    Returns:
        The total, or ``inf`` if any house was not reached.

    Raises:
        InvalidConfigurationError: If the grid has no houses.
    """
    total = 0
    houses = 0
    for _, _, cell in grid.iter_cells():
        if cell.type is not CellType.HOUSE:
            continue
        if not cell.is_reachable:
            # House enclosed by trees, or candidate walled off from it
            return math.inf
        total += cell.distance
        houses += 1
    if houses == 0:
        msg = "map has no houses, nothing to minimise"
        raise InvalidConfigurationError(msg)
    return float(total)


def find_best_well(grid: Grid) -> PlacementResult:
    """Try every empty cell as a well site and return the cheapest.

    Distances on ``grid`` are left reset when this returns.

    Args:
        grid: The map to search.  Cell types are not modified.

    Returns:
        The best placement.  Check ``found``: if every empty cell is cut
        off from at least one house, no placement exists.

    Raises:
        InvalidConfigurationError: If the grid has no houses.
    """
    if not grid.houses():
        msg = "map has no houses, nothing to minimise"
        raise InvalidConfigurationError(msg)

    result = PlacementResult(
        costs=np.full((grid.height, grid.width), np.inf, dtype=np.float64),
    )
    candidates = 0
    for x, y, cell in grid.iter_cells():
        if cell.type is not CellType.EMPTY:
            continue
        candidates += 1
        grid.reset_distances()
        propagate(grid, y, x)
        total = total_distance(grid)
        result.costs[y, x] = total
        logger.debug("candidate (%d, %d) total=%s", x, y, total)
        if total < result.total_distance:
            result.x, result.y, result.total_distance = x, y, total
    grid.reset_distances()

    if result.found:
        logger.info(
            "best well at (%d, %d), total distance %d over %d candidates",
            result.x,
            result.y,
            result.total_distance,
            candidates,
        )
    else:
        logger.warning(
            "no placement among %d candidates reaches every house",
            candidates,
        )
    return result
