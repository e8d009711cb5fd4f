"""SitePlanner -- generate a map, place the well, draw the paths.

Owns the grid and the random generator for one batch run, in this
order:

1. Populate the map with trees, then houses
2. Search every empty cell for the cheapest well site
3. Mark the winner as the well
4. Propagate distances from the well
5. Walk each house back to the well, marking path cells
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass, field

import numpy as np
from numpy.random import Generator

from wellsite.map.cell import CellType
from wellsite.map.grid import Grid
from wellsite.planner.config import PlannerConfig
from wellsite.search.facility import PlacementResult, find_best_well
from wellsite.search.paths import draw_paths
from wellsite.search.propagation import propagate
from wellsite.ui.text_renderer import render_costs, render_map

logger = logging.getLogger(__name__)


@dataclass
class PlanReport:
    """What a planner run produced.

    Attributes:
        result: The facility search outcome.
        paths: One house-to-well path per house; empty if no well was
            placed.
    """

    result: PlacementResult
    paths: list[list[tuple[int, int]]] = field(default_factory=list)

    @property
    def placed(self) -> bool:
        """Return True if a well was placed."""
        return self.result.found


@dataclass
class SitePlanner:
    """Runs well placement over a single map.

    Attributes:
        config: Loaded planner configuration.
        layout: Optional prebuilt map.  When omitted the map is generated
            from ``config``.
        grid: The map being planned.
        rng: Random generator seeded from ``config.seed``.
        report: Set by ``run()``.
    """

    config: PlannerConfig
    layout: InitVar[Grid | None] = None
    grid: Grid = field(init=False)
    rng: Generator = field(init=False)
    report: PlanReport | None = field(init=False, default=None)

    def __post_init__(self, layout: Grid | None) -> None:
        """Seed the RNG and generate the map if none was given."""
        self.rng = np.random.default_rng(self.config.seed)
        if layout is not None:
            self.grid = layout
        else:
            self.grid = Grid(width=self.config.width, height=self.config.height)
            self.grid.populate(
                self.rng,
                houses=self.config.houses,
                trees=self.config.trees,
            )
            logger.debug(
                "generated %dx%d map: %d houses, %d trees",
                self.grid.width,
                self.grid.height,
                self.grid.count(CellType.HOUSE),
                self.grid.count(CellType.TREE),
            )

    def run(self) -> PlanReport:
        """Place the well and draw paths.

        Raises:
            InvalidConfigurationError: If the map has no houses.
            PathReconstructionError: If a path cannot be walked back to
                the chosen well.
        """
        result = find_best_well(self.grid)
        self.report = PlanReport(result=result)
        if not result.found:
            return self.report

        self.grid.cell_at(result.x, result.y).type = CellType.WELL
        self.grid.reset_distances()
        propagate(self.grid, result.y, result.x)
        self.report.paths = draw_paths(self.grid, result.position)
        return self.report

    def render(self) -> str:
        """Render the map, plus the cost table if configured."""
        text = render_map(self.grid, show_distances=self.config.show_distances)
        if self.config.show_costs and self.report is not None:
            text += "\n\n" + render_costs(self.report.result)
        return text
