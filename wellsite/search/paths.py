"""Path reconstruction -- walk from each house back to the well.

Requires distances from a single propagation run rooted at the well.
Each walk follows strictly decreasing distances, preferring neighbours
in the order up, down, right, left, and marks the empty cells it crosses
as path.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wellsite.map.cell import CellType

if TYPE_CHECKING:
    from wellsite.map.grid import Grid

logger = logging.getLogger(__name__)


class PathReconstructionError(RuntimeError):
    """Distances on the grid do not lead back to the well."""


def trace_path(grid: Grid, x: int, y: int) -> list[tuple[int, int]]:
    """Follow decreasing distances from ``(x, y)`` down to distance 0.

    Args:
        grid: Map annotated by a propagation run.
        x: Starting column.
        y: Starting row.

    Returns:
        Coordinates from the start to the source inclusive.  Its length
        is the start cell's distance plus one.

    Raises:
        PathReconstructionError: If the start was never reached or a
            step has no neighbour one closer to the source.
    """
    cell = grid.cell_at(x, y)
    if not cell.is_reachable:
        msg = f"({x}, {y}) was not reached from the well"
        raise PathReconstructionError(msg)

    path = [(x, y)]
    distance = cell.distance
    while distance > 0:
        for nx, ny in grid.neighbours(x, y):
            if grid.cells[ny][nx].distance == distance - 1:
                x, y = nx, ny
                break
        else:
            msg = f"dead end at ({x}, {y}) with distance {distance}"
            raise PathReconstructionError(msg)
        path.append((x, y))
        distance -= 1
    return path


def draw_paths(grid: Grid, well: tuple[int, int]) -> list[list[tuple[int, int]]]:
    """Mark a shortest path from every house to ``well``.

    Empty cells on a path become ``CellType.PATH``; houses and the well
    keep their type.

    Args:
        grid: Map whose distances come from propagating out of ``well``.
        well: ``(x, y)`` of the well.

    Returns:
        One path per house, in row-major house order.

    Raises:
        PathReconstructionError: If the distances are not rooted at
            ``well`` or any house cannot be walked back to it.
    """
    wx, wy = well
    if grid.cell_at(wx, wy).distance != 0:
        msg = f"distances are not rooted at the well ({wx}, {wy})"
        raise PathReconstructionError(msg)

    paths: list[list[tuple[int, int]]] = []
    for hx, hy in grid.houses():
        path = trace_path(grid, hx, hy)
        if path[-1] != well:
            msg = f"house ({hx}, {hy}) leads to {path[-1]}, not the well {well}"
            raise PathReconstructionError(msg)
        for px, py in path:
            cell = grid.cells[py][px]
            if cell.type is CellType.EMPTY:
                cell.type = CellType.PATH
        logger.debug("path from house (%d, %d): %d steps", hx, hy, len(path) - 1)
        paths.append(path)
    return paths
