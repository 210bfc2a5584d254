"""
Game module for Minesweeper.

Owns one grid, drives the one-time mine placement on the first reveal,
applies moves and tracks the game phase.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional

import numpy as np

from .cell import Position
from .exceptions import GameOverError, PlacementError
from .grid import Grid
from .placement import PlacementResult, place_mines
from .reveal import RevealResult, reveal
from .rules import check_win
from .snapshot import BoardSnapshot

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible phases of a game."""

    AWAITING_FIRST_MOVE = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.columns - 1
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "e": EASY,
    "m": MEDIUM,
    "h": HARD,
}


# ============================================================================
# Game Class
# ============================================================================

@dataclass
class Game:
    """
    One single-player Minesweeper game.

    Mines are placed on the first accepted reveal, so the opening move
    never detonates.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    grid: Grid = field(init=False, repr=False)
    phase: GamePhase = field(init=False, default=GamePhase.AWAITING_FIRST_MOVE)
    placement: Optional[PlacementResult] = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Build the grid after dataclass creation."""
        if self.rng is None:
            self.rng = np.random.default_rng()
        self.grid = Grid.build(self.config.rows, self.config.columns)

    @classmethod
    def from_layout(
        cls, config: BoardConfig, mines: Iterable[Position]
    ) -> "Game":
        """
        Create a game with mines planted at fixed positions.

        The game starts in progress; no first-move protection applies.

        Raises:
            ValueError: If the layout does not hold config.mine_count mines.
        """
        game = cls(config)
        positions = set(mines)
        if len(positions) != config.mine_count:
            raise ValueError(
                f"Layout has {len(positions)} mines, expected {config.mine_count}"
            )
        for row, col in positions:
            game.grid.cell(row, col).is_mine = True
        game.placement = PlacementResult(
            requested=config.mine_count,
            placed=config.mine_count,
            passes=0,
            probability=config.mine_count / len(game.grid),
        )
        game.phase = GamePhase.IN_PROGRESS
        return game

    # ========================================================================
    # Game Actions
    # ========================================================================

    def submit_move(self, row: int, col: int, is_flag: bool = False) -> RevealResult:
        """
        Apply one move.

        The first reveal marks the target cleared, places the mines around
        it and only then reveals it normally.

        Args:
            row: Row index, already bounds-checked by the caller.
            col: Column index, already bounds-checked by the caller.
            is_flag: Toggle a flag instead of revealing.

        Returns:
            The RevealResult of the move.

        Raises:
            GameOverError: If the game has already been won or lost.
            GridPositionError: If the position is outside the board.
        """
        if self.is_over:
            raise GameOverError(f"Game is already {self.phase.name.lower()}")

        cell = self.grid.cell(row, col)
        if (
            self.phase == GamePhase.AWAITING_FIRST_MOVE
            and not is_flag
            and not cell.is_flagged
        ):
            self._handle_first_move(row, col)

        result = reveal(self.grid, row, col, is_flag)

        if result == RevealResult.DETONATED:
            self.phase = GamePhase.LOST
            logger.info("Mine detonated at (%d, %d)", row, col)
        elif self.phase == GamePhase.IN_PROGRESS and check_win(
            self.grid, self.mine_count
        ):
            self.phase = GamePhase.WON
            logger.info("Board cleared")
        return result

    def _handle_first_move(self, row: int, col: int) -> None:
        """Clear the first cell and place the mines around it."""
        if self.placement is not None:
            raise PlacementError("Mines have already been placed on this board")
        self.grid.cell(row, col).reveal(0)
        self.placement = place_mines(self.grid, self.config.mine_count, self.rng)
        self.phase = GamePhase.IN_PROGRESS
        logger.debug(
            "First move at (%d, %d); %d mines placed",
            row, col, self.placement.placed,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Mines on the board, or the requested count before placement."""
        if self.placement is None:
            return self.config.mine_count
        return self.placement.placed

    @property
    def mine_probability(self) -> int:
        """Per-cell mine chance as a rounded percentage, for display."""
        if self.placement is None:
            return int(round(self.config.mine_count / len(self.grid) * 100))
        return self.placement.probability_percent

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.phase in (GamePhase.WON, GamePhase.LOST)

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return not self.is_over

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.phase == GamePhase.LOST

    def snapshot(self) -> BoardSnapshot:
        """Get a read-only view of the board for rendering."""
        return BoardSnapshot.from_grid(self.grid)

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        return [
            (row, col) for row, col in self.grid.positions()
            if self.grid.cell(row, col).is_hidden
        ]

    def reset(self) -> None:
        """Reset to a fresh board with the same configuration."""
        self.grid = Grid.build(self.config.rows, self.config.columns)
        self.phase = GamePhase.AWAITING_FIRST_MOVE
        self.placement = None


def new_game(
    rows: int,
    columns: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> Game:
    """Start a game on a rows x columns board awaiting its first move."""
    return Game(BoardConfig(rows, columns, mine_count), rng)
