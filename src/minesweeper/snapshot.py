"""
Read-only board snapshots for renderers and agents.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Tuple

import numpy as np

from .grid import Grid


class CellView(Enum):
    """What a renderer may know about a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    CLEARED = auto()
    MINE = auto()


# Observation encoding shared with MinesweeperEnv
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


@dataclass(frozen=True)
class CellSnapshot:
    """View of one cell; count is only meaningful for CLEARED cells."""

    view: CellView
    count: int = 0

    def to_observation(self) -> int:
        """
        Convert to an observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Cleared cell with adjacent mine count
            9: Revealed mine
        """
        if self.view == CellView.HIDDEN:
            return OBS_HIDDEN
        if self.view == CellView.FLAGGED:
            return OBS_FLAGGED
        if self.view == CellView.MINE:
            return OBS_MINE
        return self.count


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable per-cell view of a grid at one point in time."""

    rows: int
    columns: int
    cells: Tuple[Tuple[CellSnapshot, ...], ...]

    @classmethod
    def from_grid(cls, grid: Grid) -> "BoardSnapshot":
        """Project a grid's logical state into a snapshot."""
        cells = []
        for row in range(grid.rows):
            views = []
            for col in range(grid.columns):
                cell = grid.cell(row, col)
                if cell.is_flagged:
                    views.append(CellSnapshot(CellView.FLAGGED))
                elif cell.is_hidden:
                    views.append(CellSnapshot(CellView.HIDDEN))
                elif cell.is_detonated:
                    views.append(CellSnapshot(CellView.MINE))
                else:
                    views.append(CellSnapshot(CellView.CLEARED, cell.adjacent_mines))
            cells.append(tuple(views))
        return cls(grid.rows, grid.columns, tuple(cells))

    def __getitem__(self, position: Tuple[int, int]) -> CellSnapshot:
        row, col = position
        return self.cells[row][col]

    def __iter__(self) -> Iterator[Tuple[CellSnapshot, ...]]:
        return iter(self.cells)

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, columns) using the encoding of
            CellSnapshot.to_observation.
        """
        obs = np.zeros((self.rows, self.columns), dtype=np.int8)
        for row, views in enumerate(self.cells):
            for col, cell in enumerate(views):
                obs[row, col] = cell.to_observation()
        return obs
