"""Tests for wellsite.ui.text_renderer."""

from wellsite.map.grid import Grid
from wellsite.search.facility import find_best_well
from wellsite.search.propagation import propagate
from wellsite.ui.text_renderer import render_costs, render_map


class TestRenderMap:
    """Tests for the glyph map."""

    def test_glyphs_only(self) -> None:
        rows = ["H.t", "O#."]
        assert render_map(Grid.from_rows(rows)) == "H.t\nO#."

    def test_with_distances(self) -> None:
        grid = Grid.from_rows(["H.t"])
        propagate(grid, 0, 1)
        assert render_map(grid, show_distances=True) == "H(01).(00)t(XX)"

    def test_large_distance_not_truncated(self) -> None:
        grid = Grid(width=120, height=1)
        propagate(grid, 0, 0)
        assert render_map(grid, show_distances=True).endswith(".(119)")

    def test_read_only(self) -> None:
        grid = Grid.from_rows(["H.t"])
        render_map(grid, show_distances=True)
        assert render_map(grid) == "H.t"


class TestRenderCosts:
    """Tests for the candidate cost table."""

    def test_costs(self) -> None:
        result = find_best_well(Grid.from_rows(["H.H", "..."]))
        assert render_costs(result) == "   .   2   .\n   4   4   4"
