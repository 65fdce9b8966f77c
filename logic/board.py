"""
Board representation for TicTacToe.
The board is a flat list of 9 cells, indexed 0-8 row by row.
"""

from enum import Enum
from typing import Optional, List


class Player(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# 3x3 grid, row-major
BOARD_SIZE = 9
ROW_LENGTH = 3

# A cell is None when empty, otherwise the Player who marked it
Board = List[Optional[Player]]


def new_board() -> Board:
    """Create an empty board."""
    return [None] * BOARD_SIZE


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to scan.

    Returns:
        Empty cell indices in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    """True when no empty cell is left."""
    return all(cell is not None for cell in board)


def format_board(board: Board, show_indices: bool = False) -> str:
    """
    Render the board as a text grid.

    Args:
        board: The board to render.
        show_indices: Show the 1-9 key for empty cells instead of a blank.

    Returns:
        A multi-line string.
    """
    lines = []
    for row in range(ROW_LENGTH):
        symbols = []
        for col in range(ROW_LENGTH):
            index = row * ROW_LENGTH + col
            cell = board[index]
            if cell is not None:
                symbols.append(cell.value)
            elif show_indices:
                symbols.append(str(index + 1))
            else:
                symbols.append(" ")
        lines.append(" " + " | ".join(symbols))
        if row < ROW_LENGTH - 1:
            lines.append("---+---+---")
    return "\n".join(lines)
