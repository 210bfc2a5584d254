"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/flagged/revealed), mine content and precomputed neighbor indices.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible logical states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


Position = Tuple[int, int]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Set once by placement.
        state: Current logical state (hidden, flagged or revealed).
        adjacent_mines: Mine count disclosed when revealed (0-8).
        neighbors: (row, col) indices of the up-to-8 surrounding cells.
    """

    is_mine: bool = False
    state: CellState = CellState.HIDDEN
    adjacent_mines: int = 0
    neighbors: Tuple[Position, ...] = ()

    def reveal(self, adjacent_mines: int = 0) -> None:
        """
        Reveal this cell with the given adjacency count.

        Revealing is irreversible; revealing again only refreshes the count.
        """
        self.state = CellState.REVEALED
        self.adjacent_mines = adjacent_mines

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_detonated(self) -> bool:
        """Check if cell is a mine that has been revealed."""
        return self.is_mine and self.state == CellState.REVEALED
