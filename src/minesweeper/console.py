"""
Text interface for Minesweeper.

Parses typed moves into normalized commands, draws snapshots as text and
runs the interactive replay loop.
"""
import argparse
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .config import PlayConfig, load_config
from .exceptions import InvalidCommandError
from .game import DIFFICULTIES, BoardConfig, Game
from .snapshot import BoardSnapshot, CellSnapshot, CellView

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

GLYPH_HIDDEN = "? "
GLYPH_CLEARED = "_ "
GLYPH_MINE = "* "
GLYPH_FLAGGED = "F "

FLAG_PREFIX = "F"

# Signed ASCII integer, as accepted by the move prompt
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")

TIPS = (
    'Tip: Input of "1,2" means first column and second row over '
    '- don\'t use "" characters, please.',
    "Tip: To flag a mine use 'F' - e.g. F1,2",
)

NOT_UNDERSTOOD = "I didn't understand... try again."


# ============================================================================
# Move Interpreter
# ============================================================================

@dataclass(frozen=True)
class Command:
    """A normalized move: 0-based, top-origin indices."""

    row: int
    column: int
    is_flag: bool = False


def parse_command(text: str, rows: int, columns: int) -> Command:
    """
    Turn typed input into a Command.

    Input is "column,row", both 1-based, with rows counted from the bottom
    of the board. A leading "F" marks a flag toggle, e.g. "F3,4".

    Args:
        text: Raw input line.
        rows: Board rows.
        columns: Board columns.

    Returns:
        Command with in-bounds, top-origin indices.

    Raises:
        InvalidCommandError: If the input is malformed or out of range.
    """
    fields = text.strip().split(",")
    if len(fields) != 2:
        raise InvalidCommandError(NOT_UNDERSTOOD)

    column_field = fields[0].strip()
    is_flag = column_field.upper().startswith(FLAG_PREFIX)
    if is_flag:
        column_field = column_field[len(FLAG_PREFIX):]

    row_field = fields[1].strip()
    if not (NUMBER_PATTERN.fullmatch(column_field) and NUMBER_PATTERN.fullmatch(row_field)):
        raise InvalidCommandError(NOT_UNDERSTOOD)

    column = int(column_field) - 1
    row_from_bottom = int(row_field) - 1

    if not (0 <= row_from_bottom < rows and 0 <= column < columns):
        raise InvalidCommandError("That's not a valid row and column! Try again.")

    return Command(row=rows - row_from_bottom - 1, column=column, is_flag=is_flag)


# ============================================================================
# Rendering
# ============================================================================

def glyph(cell: CellSnapshot) -> str:
    """Two-character glyph for one cell."""
    if cell.view == CellView.HIDDEN:
        return GLYPH_HIDDEN
    if cell.view == CellView.FLAGGED:
        return GLYPH_FLAGGED
    if cell.view == CellView.MINE:
        return GLYPH_MINE
    if cell.count == 0:
        return GLYPH_CLEARED
    return f"{cell.count} "


def render_board(snapshot: BoardSnapshot) -> str:
    """
    Draw a snapshot as text.

    Rows are labelled from the bottom on the right; columns are labelled
    1-based underneath, split over two lines (tens, then ones) when the
    board has ten or more columns.
    """
    lines = []
    for index, row in enumerate(snapshot):
        label = snapshot.rows - index
        lines.append("".join(glyph(cell) for cell in row) + f"  < {label}")
    lines.append("")
    lines.append("^ " * snapshot.columns)

    numbers = range(1, snapshot.columns + 1)
    lines.append("".join(f"{i if i < 10 else i // 10} " for i in numbers))
    if snapshot.columns >= 10:
        lines.append("".join("  " if i < 10 else f"{i % 10} " for i in numbers))
    return "\n".join(lines) + "\n"


def render_mine_layout(game: Game) -> str:
    """Debug view of where the mines are."""
    lines = []
    for row in range(game.grid.rows):
        lines.append("".join(
            GLYPH_MINE if game.grid.cell(row, col).is_mine else GLYPH_CLEARED
            for col in range(game.grid.columns)
        ))
    return "\n".join(lines) + "\n"


# ============================================================================
# Interactive Loop
# ============================================================================

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


def _ask(
    question: Sequence[str],
    choices: Sequence[str],
    input_fn: InputFn,
    output_fn: OutputFn,
) -> str:
    """Repeat a question until one of the choices is typed."""
    while True:
        for line in question:
            output_fn(line)
        answer = input_fn().strip()
        if answer in choices:
            return answer
        output_fn(NOT_UNDERSTOOD)


def choose_board(config: PlayConfig, input_fn: InputFn, output_fn: OutputFn) -> BoardConfig:
    """Pick the board for the next game, prompting if nothing is configured."""
    if config.board is not None:
        return config.board
    difficulty = config.difficulty
    if difficulty is None:
        difficulty = _ask(
            ("What size board do you want to play?",
             "easy (e), medium (m), or hard (h)?"),
            tuple(DIFFICULTIES), input_fn, output_fn,
        )
    return DIFFICULTIES[difficulty]


def read_command(
    game: Game,
    config: PlayConfig,
    input_fn: InputFn,
    output_fn: OutputFn,
) -> Command:
    """Show the board and read moves until one parses."""
    display = render_board(game.snapshot())
    while True:
        output_fn(display)
        if config.debug:
            output_fn("Debug:")
            output_fn(render_mine_layout(game))
        if config.show_tips and game.placement is None:
            for tip in TIPS:
                output_fn(tip)
        try:
            return parse_command(input_fn(), game.config.rows, game.config.columns)
        except InvalidCommandError as exc:
            output_fn(str(exc))


def play_game(
    board: BoardConfig,
    config: PlayConfig,
    rng: np.random.Generator,
    input_fn: InputFn,
    output_fn: OutputFn,
) -> bool:
    """
    Play one game to the end.

    Returns:
        True if the game was won.
    """
    game = Game(board, rng)
    while game.is_playing:
        command = read_command(game, config, input_fn, output_fn)
        placed_before = game.placement is not None
        game.submit_move(command.row, command.column, command.is_flag)

        if not placed_before and game.placement is not None:
            output_fn(
                f"NOTE: Every spot has a {game.mine_probability}% "
                "chance of a mine! Watch out!"
            )
            if game.placement.shortfall:
                output_fn(
                    "NOTE: hmmm... all mines weren't added to the board, "
                    "but we are continuing anyway!\n"
                )

    output_fn(render_board(game.snapshot()))
    if game.is_won:
        output_fn("YOU WON!!!")
    else:
        output_fn("You blew up... Sorry.")
    return game.is_won


def play(
    config: Optional[PlayConfig] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> List[bool]:
    """
    Run games until the player declines to play again.

    Returns:
        Outcome of every game played, True for a win.
    """
    config = config or PlayConfig()
    rng = np.random.default_rng(config.seed)
    outcomes = []

    keep_playing = True
    while keep_playing:
        board = choose_board(config, input_fn, output_fn)
        outcomes.append(play_game(board, config, rng, input_fn, output_fn))
        again = _ask(
            ("Do you want to play again?", "Yes (y) or No (n)?"),
            ("y", "n"), input_fn, output_fn,
        )
        keep_playing = again == "y"

    logger.debug("Session over: %d/%d games won", sum(outcomes), len(outcomes))
    return outcomes


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument(
        "--difficulty", choices=sorted(DIFFICULTIES), default=None,
        help="Board preset: easy (e), medium (m) or hard (h)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for mine placement")
    parser.add_argument("--debug", action="store_true", help="Show the mine layout every turn")
    parser.add_argument("--no-tips", action="store_true", help="Hide input tips")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run an interactive session."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(asctime)s] %(message)s',
        datefmt='%H:%M:%S',
    )

    config = load_config(args.config)
    if args.difficulty is not None:
        config.difficulty = args.difficulty
    if args.seed is not None:
        config.seed = args.seed
    if args.debug:
        config.debug = True
    if args.no_tips:
        config.show_tips = False

    try:
        play(config)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
    return 0
