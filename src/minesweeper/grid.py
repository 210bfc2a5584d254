"""
Grid module for Minesweeper game.

A fixed-size arena of cells addressed by (row, col). Neighbor lists are
computed once at build time and hold indices, never cell references.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .cell import Cell, Position
from .exceptions import GridPositionError


# 8-neighborhood offsets in row-major order, excluding the cell itself
NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """
    Rectangular rows x columns collection of cells.

    The grid exclusively owns its cells; callers address them through
    (row, col) pairs.
    """

    rows: int
    columns: int
    _cells: List[List[Cell]] = field(default_factory=list, repr=False)

    @classmethod
    def build(cls, rows: int, columns: int) -> "Grid":
        """
        Allocate a rows x columns grid and link every cell's neighbors.

        Args:
            rows: Number of rows, must be >= 1.
            columns: Number of columns, must be >= 1.

        Returns:
            A grid of hidden, mine-free cells.
        """
        if rows < 1 or columns < 1:
            raise ValueError("Board dimensions must be positive")

        grid = cls(rows, columns)
        grid._cells = [
            [Cell(neighbors=grid._compute_neighbors(row, col))
             for col in range(columns)]
            for row in range(rows)
        ]
        return grid

    def _compute_neighbors(self, row: int, col: int) -> Tuple[Position, ...]:
        """Clip the 8 offsets around (row, col) to the grid bounds."""
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return tuple(neighbors)

    # ========================================================================
    # Accessors
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            GridPositionError: If the position is outside the grid.
        """
        if not self.is_valid_position(row, col):
            raise GridPositionError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.columns} board"
            )
        return self._cells[row][col]

    def neighbors(self, row: int, col: int) -> Tuple[Position, ...]:
        """Get the precomputed neighbor positions of a cell."""
        return self.cell(row, col).neighbors

    def positions(self) -> Iterator[Position]:
        """Iterate all positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.columns):
                yield row, col

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.columns

    @property
    def mine_count(self) -> int:
        """Number of cells currently holding a mine."""
        return sum(1 for cell in self if cell.is_mine)
