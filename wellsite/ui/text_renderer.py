"""Plain-text rendering of the map and of candidate costs.

Both functions are read-only and return a string; printing is left to
the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from wellsite.map.grid import Grid
    from wellsite.search.facility import PlacementResult

_UNREACHABLE_MARK = "(XX)"


def render_map(grid: Grid, *, show_distances: bool = False) -> str:
    """Return the map as one line of glyphs per row.

    Args:
        grid: The map to draw.
        show_distances: Follow each glyph with its distance as ``(NN)``,
            or ``(XX)`` if unreachable.
    """
    lines: list[str] = []
    for row in grid.cells:
        parts: list[str] = []
        for cell in row:
            parts.append(cell.type.value)
            if show_distances:
                parts.append(
                    f"({cell.distance:02d})"
                    if cell.is_reachable
                    else _UNREACHABLE_MARK,
                )
        lines.append("".join(parts))
    return "\n".join(lines)


def render_costs(result: PlacementResult) -> str:
    """Return the per-candidate totals as a right-aligned table.

    Cells that were not candidates, or could not reach every house,
    show as ``.``.
    """
    lines: list[str] = []
    for row in result.costs:
        lines.append(
            "".join(f"{int(v):4d}" if np.isfinite(v) else "   ." for v in row),
        )
    return "\n".join(lines)
