"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the game is a draw.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple
from .board import Board, Player, format_board, is_full


# All possible winning lines, checked in this order
WINNING_COMBINATIONS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class OutcomeStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of checking a board.

    winner and combination are only set when status is WON.
    """
    status: OutcomeStatus
    winner: Optional[Player] = None
    combination: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player, combination: Tuple[int, int, int]) -> "GameOutcome":
        return cls(OutcomeStatus.WON, winner=player, combination=combination)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == OutcomeStatus.DRAW


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally). Stateless, so it is
    safe to call on hypothetical boards during search.
    """

    WINNING_LINES = WINNING_COMBINATIONS

    def check_outcome(self, board: Board) -> GameOutcome:
        """
        Evaluate a board.

        Args:
            board: The board to evaluate.

        Returns:
            WON with the first completed line in table order, DRAW for a
            full board without a line, IN_PROGRESS otherwise.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return GameOutcome.won(winner, line)

        if is_full(board):
            return GameOutcome.draw()

        return GameOutcome.in_progress()

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """Return the owner of a line if all 3 cells hold the same mark."""
        a, b, c = line
        first = board[a]
        if first is None:
            return None  # Empty cell, no winner on this line
        if board[b] == first and board[c] == first:
            return first
        return None

    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the winning player, or None if nobody has a line."""
        return self.check_outcome(board).winner

    def check_draw(self, board: Board) -> bool:
        """True when the board is full and nobody has a line."""
        return self.check_outcome(board).is_draw

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the winning line as a triple of indices, or None."""
        return self.check_outcome(board).combination


_checker = WinChecker()


def check_outcome(board: Board) -> GameOutcome:
    """Evaluate a board with the shared checker."""
    return _checker.check_outcome(board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    X, O = Player.X, Player.O

    # Diagonal win
    board = [X, O, None,
             None, X, O,
             None, None, X]
    print(format_board(board))
    outcome = check_outcome(board)
    print(f"Outcome: {outcome}")
    assert outcome.winner == X and outcome.combination == (0, 4, 8)

    # Draw
    board = [X, O, X,
             X, O, O,
             O, X, X]
    print(format_board(board))
    outcome = check_outcome(board)
    print(f"Outcome: {outcome}")
    assert outcome.is_draw

    print("\nWinChecker test done!")
