"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies them.
"""

from typing import Optional, List
from dataclasses import dataclass
from .board import Board, Player, BOARD_SIZE, get_empty_cells


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class InvalidMove(ValueError):
    """
    Raised when a move targets a cell outside the board or an occupied cell.

    Always recoverable: the caller should drop the request and keep playing.
    """

    def __init__(self, index, message: str):
        super().__init__(message)
        self.index = index


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be an integer 0-8
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass but never a cell index
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be an integer 0-8."
            )

        if not 0 <= index < BOARD_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-8."
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """Get all empty cells, in ascending order."""
        return get_empty_cells(board)


_validator = MoveValidator()


def apply_move(board: Board, index: int, player: Player) -> Board:
    """
    Place a mark and return the resulting board.

    The input board is left untouched.

    Args:
        board: Current board.
        index: Cell to mark (0-8).
        player: Who is marking it.

    Returns:
        A new board with the cell set to player.

    Raises:
        InvalidMove: index is out of range or the cell is taken.
    """
    result = _validator.validate_move(board, index)
    if not result.is_valid:
        raise InvalidMove(index, result.error_message)

    new_board = list(board)
    new_board[index] = player
    return new_board
