"""
Unit tests for Cell class.

Tests cell state management and reveal/flag behavior.
"""
import pytest
from minesweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_no_neighbors(self) -> None:
        """A cell outside a grid has no neighbors."""
        assert Cell().neighbors == ()

    def test_mine_cell_creation(self) -> None:
        """Can create a cell that is a mine."""
        cell = Cell(is_mine=True)
        assert cell.is_mine is True


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True

    @pytest.mark.parametrize("count", range(0, 9))
    def test_reveal_records_adjacent_count(self, count: int) -> None:
        """Revealed cell keeps the count it was revealed with."""
        cell = Cell()
        cell.reveal(count)
        assert cell.adjacent_mines == count

    def test_revealed_mine_is_detonated(self, mine_cell: Cell) -> None:
        """Revealing a mine marks it detonated."""
        assert mine_cell.is_detonated is False
        mine_cell.reveal()
        assert mine_cell.is_detonated is True

    def test_revealed_safe_cell_is_not_detonated(self, hidden_cell: Cell) -> None:
        """Only mines can be detonated."""
        hidden_cell.reveal()
        assert hidden_cell.is_detonated is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        result = hidden_cell.toggle_flag()
        assert result is True

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.is_flagged is True

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        result = hidden_cell.toggle_flag()
        assert result is False
        assert hidden_cell.is_revealed is True
