"""
Deferred mine placement.

Mines are scattered only after the first reveal, so the opening move and
every cell bordering an already revealed cell stay mine-free.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .grid import Grid
from .exceptions import PlacementError

logger = logging.getLogger(__name__)

# Full-grid scans before placement gives up on the remaining mines
MAX_PASSES = 10


@dataclass(frozen=True)
class PlacementResult:
    """
    Outcome of a placement run.

    Attributes:
        requested: Mines asked for.
        placed: Mines actually planted.
        passes: Full-grid scans performed.
        probability: Per-cell mine probability used for each draw.
    """

    requested: int
    placed: int
    passes: int
    probability: float

    @property
    def shortfall(self) -> bool:
        """True when fewer mines were planted than requested."""
        return self.placed < self.requested

    @property
    def probability_percent(self) -> int:
        """Per-cell probability as a rounded percentage for display."""
        return int(round(self.probability * 100))


def is_eligible(grid: Grid, row: int, col: int) -> bool:
    """
    Check whether a cell may receive a mine.

    A candidate holds no mine yet, is still hidden, and touches no
    revealed cell.
    """
    cell = grid.cell(row, col)
    if cell.is_mine or not cell.is_hidden:
        return False
    return not any(
        grid.cell(n_row, n_col).is_revealed for n_row, n_col in cell.neighbors
    )


def place_mines(
    grid: Grid,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
    max_passes: int = MAX_PASSES,
) -> PlacementResult:
    """
    Randomly plant mines across the eligible cells of a grid.

    Each pass scans the grid in row-major order and plants a mine on every
    eligible cell with probability mine_count / (rows * columns), stopping
    as soon as the requested number is reached. After max_passes scans the
    run ends even if mines remain unplaced.

    Args:
        grid: Grid with the first move already revealed.
        mine_count: Number of mines requested.
        rng: Random generator (default: a fresh unseeded generator).
        max_passes: Bound on full-grid scans.

    Returns:
        PlacementResult describing what was planted.

    Raises:
        PlacementError: If the grid already holds mines.
    """
    if grid.mine_count:
        raise PlacementError("Mines have already been placed on this board")
    if rng is None:
        rng = np.random.default_rng()

    probability = mine_count / len(grid)
    logger.debug(
        "Placing %d mines on %dx%d grid (p=%.3f)",
        mine_count, grid.rows, grid.columns, probability,
    )

    remaining = mine_count
    passes = 0
    while remaining > 0 and passes < max_passes:
        for row, col in grid.positions():
            if remaining == 0:
                break
            if is_eligible(grid, row, col) and rng.random() < probability:
                grid.cell(row, col).is_mine = True
                remaining -= 1
        passes += 1

    result = PlacementResult(
        requested=mine_count,
        placed=mine_count - remaining,
        passes=passes,
        probability=probability,
    )
    if result.shortfall:
        logger.warning(
            "Only %d of %d mines were placed after %d passes",
            result.placed, result.requested, result.passes,
        )
    return result
