"""Shared fixtures for the wellsite test suite."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import numpy as np
import pytest
from numpy.random import Generator

from wellsite.map.cell import CellType
from wellsite.map.grid import Grid
from wellsite.planner.config import PlannerConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """An empty 8x8 grid for fast tests."""
    return Grid(width=8, height=8)


@pytest.fixture
def corner_grid() -> Grid:
    """Two houses in opposite corners with several equally short routes."""
    return Grid.from_rows(
        [
            "H...",
            "....",
            "...H",
        ],
    )


@pytest.fixture
def default_config() -> PlannerConfig:
    """Default planner config (no YAML file needed)."""
    return PlannerConfig(seed=7, width=12, height=8, houses=4, trees=10)


def reference_distances(grid: Grid, x: int, y: int) -> dict[tuple[int, int], int]:
    """Independent BFS used to check propagation results."""
    seen = {(x, y): 0}
    queue = deque([(x, y)])
    while queue:
        cx, cy = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = cx + dx, cy + dy
            if not (0 <= nx < grid.width and 0 <= ny < grid.height):
                continue
            if (nx, ny) in seen or grid.cells[ny][nx].type is CellType.TREE:
                continue
            seen[(nx, ny)] = seen[(cx, cy)] + 1
            queue.append((nx, ny))
    return seen


@pytest.fixture
def bfs() -> Callable[[Grid, int, int], dict[tuple[int, int], int]]:
    """The reference BFS, for tests that check distances."""
    return reference_distances
