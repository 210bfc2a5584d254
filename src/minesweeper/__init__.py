"""
Minesweeper game module.

Provides the core board model (grid, deferred mine placement, cascading
reveal, win evaluation), a text interface and a Gymnasium environment.
"""
from .cell import Cell, CellState
from .grid import Grid
from .placement import PlacementResult, place_mines
from .reveal import RevealResult, reveal
from .rules import check_win
from .snapshot import BoardSnapshot, CellSnapshot, CellView
from .game import (
    Game,
    GamePhase,
    BoardConfig,
    new_game,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
)
from .exceptions import (
    GameOverError,
    GridPositionError,
    InvalidCommandError,
    PlacementError,
)
from .console import Command, parse_command, render_board, play
from .config import PlayConfig, load_config
from .environment import MinesweeperEnv

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "CellState",
    "Grid",
    "PlacementResult",
    "place_mines",
    "RevealResult",
    "reveal",
    "check_win",
    "BoardSnapshot",
    "CellSnapshot",
    "CellView",
    "Game",
    "GamePhase",
    "BoardConfig",
    "new_game",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "GameOverError",
    "GridPositionError",
    "InvalidCommandError",
    "PlacementError",
    "Command",
    "parse_command",
    "render_board",
    "play",
    "PlayConfig",
    "load_config",
    "MinesweeperEnv",
]
