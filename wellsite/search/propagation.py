"""Distance propagation -- obstacle-aware flood fill from a single source.

Treats the grid as an unweighted graph in which a cell may be entered
unless it holds a tree.  Distances are written into ``Cell.distance``
in-place using a FIFO work queue, so depth is bounded by memory rather
than the interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from wellsite.map.cell import CellType

if TYPE_CHECKING:
    from wellsite.map.grid import Grid


def propagate(grid: Grid, source_y: int, source_x: int) -> None:
    """Write the shortest walking distance from the source into every cell.

    The caller must reset distances beforehand.  The source itself gets
    distance 0 whatever its type; only stepping *into* a tree is refused.
    A cell is updated only when the new distance is strictly smaller than
    the stored one.  An out-of-bounds source does nothing.

    Args:
        grid: The map to annotate.
        source_y: Row of the source cell.
        source_x: Column of the source cell.
    """
    if not grid.in_bounds(source_x, source_y):
        return

    source = grid.cells[source_y][source_x]
    if source.distance <= 0:
        return
    source.distance = 0

    queue: deque[tuple[int, int]] = deque([(source_x, source_y)])
    while queue:
        x, y = queue.popleft()
        step = grid.cells[y][x].distance + 1
        for nx, ny in grid.neighbours(x, y):
            cell = grid.cells[ny][nx]
            if cell.type is CellType.TREE:
                continue
            if step < cell.distance:
                cell.distance = step
                queue.append((nx, ny))
