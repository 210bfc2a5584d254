"""
Win evaluation over the whole grid.
"""
from .grid import Grid


def check_win(grid: Grid, mine_count: int) -> bool:
    """
    Decide whether the board is won.

    The board is won when every hidden cell is a mine and the mines that
    are flagged or still hidden add up to mine_count. Flag accuracy
    beyond that count is not checked, so a player can win without placing
    a single flag.

    Args:
        grid: Grid to evaluate.
        mine_count: Number of mines on the board.

    Returns:
        True if the win predicate holds.
    """
    hidden_cells = 0
    hidden_mines = 0
    flagged_mines = 0
    for cell in grid:
        if cell.is_hidden:
            hidden_cells += 1
            if cell.is_mine:
                hidden_mines += 1
        elif cell.is_flagged and cell.is_mine:
            flagged_mines += 1

    return (
        hidden_cells == hidden_mines
        and flagged_mines + hidden_mines == mine_count
    )
