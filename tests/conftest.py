"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import BoardConfig, Cell, Game, Grid


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible placement."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_game(rng: np.random.Generator) -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game(BoardConfig(), rng)


@pytest.fixture
def empty_game(rng: np.random.Generator) -> Game:
    """Create a game with no mines for cascade testing."""
    return Game(BoardConfig(5, 5, 0), rng)


@pytest.fixture
def corner_mine_game() -> Game:
    """3x3 game with a single mine in the bottom-right corner."""
    return Game.from_layout(BoardConfig(3, 3, 1), [(2, 2)])


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def small_grid() -> Grid:
    """Create a 3x3 grid."""
    return Grid.build(3, 3)


@pytest.fixture
def medium_grid() -> Grid:
    """Create a 5x7 grid."""
    return Grid.build(5, 7)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
