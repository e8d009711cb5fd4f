"""Cell -- a single position on the village map.

A cell carries its terrain type and a scratch ``distance`` that the
propagation engine rewrites on every run.  Distances are reset to
``UNREACHABLE`` between runs.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

# Larger than any finite walking distance, so a strict ``<`` test treats
# it as +infinity.
UNREACHABLE: int = sys.maxsize


class CellType(Enum):
    """What occupies a cell.  Values are the glyphs used when rendering."""

    EMPTY = "."
    TREE = "t"
    HOUSE = "H"
    WELL = "O"
    PATH = "#"


@dataclass
class Cell:
    """A single map position.

    Attributes:
        type: What currently occupies the cell.  Trees never change;
            empty cells may become a well or a path.
        distance: Walking distance from the current propagation source,
            or ``UNREACHABLE``.
    """

    type: CellType = CellType.EMPTY
    distance: int = UNREACHABLE

    @property
    def is_reachable(self) -> bool:
        """Return True if the last propagation run reached this cell."""
        return self.distance != UNREACHABLE
