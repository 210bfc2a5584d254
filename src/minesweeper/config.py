"""
Play configuration: dataclass defaults, optionally overridden by a YAML file.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .game import DIFFICULTIES, BoardConfig


@dataclass
class PlayConfig:
    """
    Settings for an interactive session.

    Attributes:
        difficulty: Preset key ("e", "m" or "h"); prompt each game if None.
        seed: Seed for reproducible mine placement.
        debug: Print the mine layout alongside the board every turn.
        show_tips: Print input tips until the first reveal.
        board: Custom board; takes precedence over difficulty.
    """

    difficulty: Optional[str] = None
    seed: Optional[int] = None
    debug: bool = False
    show_tips: bool = True
    board: Optional[BoardConfig] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.difficulty is not None and self.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"Unknown difficulty {self.difficulty!r} "
                f"(choose from {', '.join(DIFFICULTIES)})"
            )


def _board_from_dict(data: Dict[str, Any]) -> BoardConfig:
    """Build a BoardConfig from a {rows, columns, mines} mapping."""
    base = BoardConfig()
    return BoardConfig(
        rows=int(data.get("rows", base.rows)),
        columns=int(data.get("columns", base.columns)),
        mine_count=int(data.get("mines", base.mine_count)),
    )


def load_config(path: Optional[Union[str, Path]]) -> PlayConfig:
    """
    Load a PlayConfig from a YAML file.

    Missing keys fall back to the dataclass defaults; a missing path gives
    the defaults outright.

    Args:
        path: Path to a YAML file, or None.

    Returns:
        The loaded configuration.
    """
    if path is None:
        return PlayConfig()
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    base = PlayConfig()
    board_d = data.get("board")
    return PlayConfig(
        difficulty=data.get("difficulty", base.difficulty),
        seed=data.get("seed", base.seed),
        debug=bool(data.get("debug", base.debug)),
        show_tips=bool(data.get("show_tips", base.show_tips)),
        board=_board_from_dict(board_d) if board_d else base.board,
    )
