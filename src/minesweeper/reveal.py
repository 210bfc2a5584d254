"""
Reveal engine: flag toggling, detonation, adjacency counts and the
breadth-first cascade through zero-count regions.
"""
from collections import deque
from enum import Enum, auto
from typing import Deque, List, Set

from .cell import Position
from .grid import Grid


class RevealResult(Enum):
    """Outcome of a single move against the grid."""

    FLAGGED = auto()
    DETONATED = auto()
    CLEARED = auto()


def count_adjacent_mines(grid: Grid, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    return sum(
        1 for n_row, n_col in grid.neighbors(row, col)
        if grid.cell(n_row, n_col).is_mine
    )


def toggle_flag(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Toggle a flag between hidden and flagged.

    Revealed cells are left untouched. Never cascades and never looks at
    mine content.
    """
    grid.cell(row, col).toggle_flag()
    return RevealResult.FLAGGED


def reveal(grid: Grid, row: int, col: int, is_flag: bool = False) -> RevealResult:
    """
    Apply one move to the cell at (row, col).

    Args:
        grid: Grid with mines already placed.
        row: Row index.
        col: Column index.
        is_flag: Toggle a flag instead of revealing.

    Returns:
        FLAGGED for a flag toggle or a reveal blocked by a flag,
        DETONATED if a mine was revealed, CLEARED otherwise.
    """
    if is_flag:
        return toggle_flag(grid, row, col)

    cell = grid.cell(row, col)
    if cell.is_flagged:
        # Flag lock: the flag must be removed before the cell can be revealed
        return RevealResult.FLAGGED

    if cell.is_mine:
        cell.reveal()
        return RevealResult.DETONATED

    count = count_adjacent_mines(grid, row, col)
    cell.reveal(count)
    if count == 0:
        cascade(grid, row, col)
    return RevealResult.CLEARED


def cascade(grid: Grid, row: int, col: int) -> List[Position]:
    """
    Breadth-first reveal outward from a zero-count cell.

    Every unflagged neighbor of a zero-count cell is revealed with its
    count; neighbors that are themselves zero join the frontier. Flagged
    cells are neither revealed nor traversed.

    Returns:
        Positions newly revealed by the cascade, in reveal order.
    """
    frontier: Deque[Position] = deque([(row, col)])
    visited: Set[Position] = {(row, col)}
    revealed: List[Position] = []

    while frontier:
        current_row, current_col = frontier.popleft()
        for n_row, n_col in grid.neighbors(current_row, current_col):
            neighbor = grid.cell(n_row, n_col)
            if neighbor.is_flagged or (n_row, n_col) in visited:
                continue
            if not neighbor.is_revealed:
                neighbor.reveal(count_adjacent_mines(grid, n_row, n_col))
                revealed.append((n_row, n_col))
            if neighbor.adjacent_mines == 0:
                visited.add((n_row, n_col))
                frontier.append((n_row, n_col))

    return revealed
