"""
Gymnasium environment wrapper for Minesweeper.

Drives a Game through the standard env interface so scripted players
can reveal and flag cells programmatically.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .console import render_board
from .game import BoardConfig, Game
from .reveal import RevealResult
from .snapshot import OBS_FLAGGED, OBS_MINE


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = cleared cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * columns.
        Action i < rows * columns reveals cell (i // columns, i % columns);
        the second half toggles a flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for a reveal that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._cells = self.config.rows * self.config.columns
        self.game = Game(self.config, np.random.default_rng())

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.rng = self.np_random
        self.game.reset()
        self._steps = 0
        return self.game.snapshot().to_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index, offset by rows * columns for a flag toggle.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col, is_flag = self._decode_action(action)
        self._steps += 1

        reward = self._apply(row, col, is_flag)
        observation = self.game.snapshot().to_observation()
        terminated = self.game.is_over

        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[int, int, bool]:
        """Convert flat action index to (row, col, is_flag)."""
        is_flag = action >= self._cells
        index = action % self._cells
        return index // self.config.columns, index % self.config.columns, is_flag

    def _apply(self, row: int, col: int, is_flag: bool) -> float:
        """Submit the move and score it."""
        if self.game.is_over:
            return -0.1
        cell = self.game.grid.cell(row, col)
        if not is_flag and not cell.is_hidden:
            return -0.1

        result = self.game.submit_move(row, col, is_flag)
        if self.game.is_won:
            return 10.0
        if result == RevealResult.FLAGGED:
            return 0.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(1 for cell in self.game.grid if cell.is_revealed)
        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self._cells - self.game.mine_count,
            "game_state": self.game.phase.name,
            "valid_actions": len(self.game.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.game.snapshot())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Hidden cells may be
            revealed; hidden or flagged cells may be flag-toggled.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.game.is_over:
            return mask
        for index, cell in enumerate(self.game.grid):
            if cell.is_hidden:
                mask[index] = True
            if not cell.is_revealed:
                mask[self._cells + index] = True
        return mask
