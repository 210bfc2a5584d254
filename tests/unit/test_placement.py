"""
Unit tests for deferred mine placement.
"""
import numpy as np
import pytest
from minesweeper import Grid, PlacementError, place_mines
from minesweeper.placement import MAX_PASSES, is_eligible


class FixedDraws:
    """Stand-in generator whose every draw returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def opened_grid(rows: int, columns: int, row: int, col: int) -> Grid:
    """Grid with one cell revealed as the opening move."""
    grid = Grid.build(rows, columns)
    grid.cell(row, col).reveal(0)
    return grid


class TestEligibility:
    """Test which cells may receive mines."""

    def test_revealed_cell_is_not_eligible(self) -> None:
        """The opening cell can never be mined."""
        grid = opened_grid(5, 5, 2, 2)
        assert is_eligible(grid, 2, 2) is False

    def test_neighbors_of_revealed_cell_are_not_eligible(self) -> None:
        """Cells bordering a revealed cell form the safety zone."""
        grid = opened_grid(5, 5, 2, 2)
        for n_row, n_col in grid.neighbors(2, 2):
            assert is_eligible(grid, n_row, n_col) is False

    def test_distant_hidden_cell_is_eligible(self) -> None:
        """Cells two steps away from the opening are candidates."""
        grid = opened_grid(5, 5, 2, 2)
        assert is_eligible(grid, 0, 0) is True
        assert is_eligible(grid, 4, 4) is True

    def test_flagged_cell_is_not_eligible(self) -> None:
        """Flagged cells are not hidden and stay mine-free."""
        grid = opened_grid(5, 5, 0, 0)
        grid.cell(4, 4).toggle_flag()
        assert is_eligible(grid, 4, 4) is False

    def test_mined_cell_is_not_eligible(self) -> None:
        """A cell holds at most one mine."""
        grid = opened_grid(5, 5, 0, 0)
        grid.cell(4, 4).is_mine = True
        assert is_eligible(grid, 4, 4) is False


class TestPlaceMines:
    """Test the placement run."""

    def test_first_eligible_cell_in_row_major_order(self) -> None:
        """With every draw succeeding, mines fill candidates in scan order."""
        grid = opened_grid(3, 3, 0, 0)
        result = place_mines(grid, 1, FixedDraws(0.0))
        assert grid.cell(0, 2).is_mine is True
        assert grid.mine_count == 1
        assert result.placed == 1
        assert result.passes == 1
        assert result.shortfall is False

    def test_stops_at_requested_count(self) -> None:
        """Placement never plants more mines than requested."""
        grid = opened_grid(9, 9, 0, 0)
        result = place_mines(grid, 5, FixedDraws(0.0))
        assert grid.mine_count == 5
        assert result.placed == 5

    def test_infeasible_placement_reports_shortfall(self) -> None:
        """When no candidate exists placement gives up after the pass budget."""
        grid = opened_grid(3, 3, 1, 1)
        result = place_mines(grid, 8, FixedDraws(0.0))
        assert grid.mine_count == 0
        assert result.placed == 0
        assert result.requested == 8
        assert result.passes == MAX_PASSES
        assert result.shortfall is True

    def test_failed_draws_exhaust_pass_budget(self) -> None:
        """Draws that never succeed stop after max_passes scans."""
        grid = opened_grid(9, 9, 0, 0)
        result = place_mines(grid, 10, FixedDraws(0.99), max_passes=3)
        assert result.passes == 3
        assert result.placed == 0
        assert result.shortfall is True

    def test_shortfall_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A shortfall is surfaced as a warning."""
        grid = opened_grid(3, 3, 1, 1)
        with caplog.at_level("WARNING", logger="minesweeper.placement"):
            place_mines(grid, 8, FixedDraws(0.0))
        assert "Only 0 of 8 mines were placed" in caplog.text

    def test_zero_mines(self) -> None:
        """Requesting no mines needs no passes."""
        grid = opened_grid(3, 3, 1, 1)
        result = place_mines(grid, 0, FixedDraws(0.0))
        assert result.passes == 0
        assert result.placed == 0
        assert result.shortfall is False

    def test_probability_is_mine_density(self) -> None:
        """Per-cell probability is mines over cells."""
        grid = opened_grid(9, 9, 4, 4)
        result = place_mines(grid, 10, np.random.default_rng(0))
        assert result.probability == pytest.approx(10 / 81)
        assert result.probability_percent == 12

    def test_placing_twice_raises(self) -> None:
        """Placement runs once per grid."""
        grid = opened_grid(9, 9, 4, 4)
        place_mines(grid, 10, FixedDraws(0.0))
        with pytest.raises(PlacementError):
            place_mines(grid, 10, FixedDraws(0.0))

    @pytest.mark.parametrize("seed", range(20))
    def test_mine_count_conserved(self, seed: int) -> None:
        """Planted mines match the reported count, and the request unless short."""
        grid = opened_grid(9, 9, 4, 4)
        result = place_mines(grid, 10, np.random.default_rng(seed))
        assert grid.mine_count == result.placed
        if not result.shortfall:
            assert grid.mine_count == 10

    @pytest.mark.parametrize("seed", range(20))
    def test_safety_zone_stays_clear(self, seed: int) -> None:
        """Neither the opening cell nor its neighbors receive mines."""
        grid = opened_grid(9, 9, 4, 4)
        place_mines(grid, 10, np.random.default_rng(seed))
        assert grid.cell(4, 4).is_mine is False
        for n_row, n_col in grid.neighbors(4, 4):
            assert grid.cell(n_row, n_col).is_mine is False

    def test_same_seed_same_layout(self) -> None:
        """A seeded generator reproduces the layout."""
        layouts = []
        for _ in range(2):
            grid = opened_grid(16, 30, 0, 0)
            place_mines(grid, 99, np.random.default_rng(7))
            layouts.append([cell.is_mine for cell in grid])
        assert layouts[0] == layouts[1]
