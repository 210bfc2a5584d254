"""
Exceptions raised by the Minesweeper core and its text interface.
"""


class GridPositionError(ValueError):
    """Coordinates outside the board reached the core."""


class PlacementError(RuntimeError):
    """Mine placement was invoked on a grid that already holds mines."""


class GameOverError(RuntimeError):
    """A move was submitted after the game was won or lost."""


class InvalidCommandError(ValueError):
    """Raw player input could not be turned into a move."""
