"""Grid -- the fixed-size village map.

The Grid owns every Cell, arranged as ``cells[y][x]``, and provides the
spatial queries used by propagation, facility search and path drawing.
It is built once (randomly or from text) and never resized.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

from wellsite.map.cell import UNREACHABLE, Cell, CellType

# Neighbour priority: up, down, right, left.  Path drawing depends on it.
_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (1, 0), (-1, 0))

_GLYPHS: dict[str, CellType] = {ct.value: ct for ct in CellType}


@dataclass
class Grid:
    """A 2D map of houses, trees and empty land.

    Attributes:
        width: Number of columns (>= 1).
        height: Number of rows (>= 1).
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    width: int
    height: int
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise the grid with empty cells."""
        if self.width < 1 or self.height < 1:
            msg = f"grid must be at least 1x1, got {self.width}x{self.height}"
            raise ValueError(msg)
        self.cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Grid:
        """Build a grid from rows of glyphs such as ``"H.t"``.

        Args:
            rows: One string per row, all the same length.

        Raises:
            ValueError: If rows are empty, ragged or contain unknown glyphs.
        """
        if not rows or not rows[0]:
            msg = "cannot build a grid from an empty map"
            raise ValueError(msg)
        width = len(rows[0])
        grid = cls(width=width, height=len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                msg = f"row {y} has {len(row)} cells, expected {width}"
                raise ValueError(msg)
            for x, glyph in enumerate(row):
                try:
                    grid.cells[y][x].type = _GLYPHS[glyph]
                except KeyError:
                    msg = f"unknown glyph {glyph!r} at ({x}, {y})"
                    raise ValueError(msg) from None
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies on the map."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self.cells[y][x]

    def neighbours(self, x: int, y: int) -> list[tuple[int, int]]:
        """Return in-bounds 4-neighbour coordinates of ``(x, y)``.

        Order is fixed: up, down, right, left.
        """
        result: list[tuple[int, int]] = []
        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` in row-major order."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                yield x, y, cell

    def houses(self) -> list[tuple[int, int]]:
        """Return the coordinates of every house, row-major."""
        return [
            (x, y) for x, y, cell in self.iter_cells() if cell.type is CellType.HOUSE
        ]

    def count(self, cell_type: CellType) -> int:
        """Return how many cells currently hold ``cell_type``."""
        return sum(1 for _, _, cell in self.iter_cells() if cell.type is cell_type)

    def reset_distances(self) -> None:
        """Mark every cell as unreachable ahead of a propagation run."""
        for row in self.cells:
            for cell in row:
                cell.distance = UNREACHABLE

    def populate(self, rng: Generator, *, houses: int, trees: int) -> None:
        """Scatter trees, then houses, at uniformly random positions.

        Draws are independent, so placements may land on the same cell;
        the later draw wins.  A house drawn onto a tree replaces it.

        Args:
            rng: Random generator.
            houses: Number of house draws.
            trees: Number of tree draws.
        """
        for cell_type, draws in ((CellType.TREE, trees), (CellType.HOUSE, houses)):
            for _ in range(draws):
                y = int(rng.integers(0, self.height))
                x = int(rng.integers(0, self.width))
                self.cells[y][x].type = cell_type
