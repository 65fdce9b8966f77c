"""
AI player for TicTacToe.
Picks moves at four difficulty levels, from random play up to a full
Minimax search.
"""

from enum import Enum
from typing import Optional, List

import numpy as np

from .board import Board, Player, get_empty_cells
from .win_checker import OutcomeStatus, WinChecker


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"              # Random moves
    MEDIUM = "medium"          # Win or block, else random
    HARD = "hard"              # Win or block, else center, corners, random
    IMPOSSIBLE = "impossible"  # Full minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Parse a difficulty name. Unknown names fall back to MEDIUM."""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return cls.MEDIUM


CENTER = 4
CORNERS = (0, 2, 6, 8)

# Score of a won game before the depth adjustment
WIN_SCORE = 10


class AIPlayer:
    """
    An AI that plays TicTacToe at a chosen difficulty.

    Medium and Hard share one tactical check (take a win, else block the
    opponent's win) and only differ in what they do when it finds nothing.
    Impossible searches the whole game tree and never loses.
    """

    def __init__(
        self,
        player: Player = Player.O,
        rng: Optional[np.random.Generator] = None,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source for Easy moves and Hard's corner choice.
            verbose: Print a summary line for every move chosen.
        """
        self.player = player
        self.opponent = player.opposite()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions minimax visited (for debugging)
        self.moves_evaluated = 0

    def get_move(self, board: Board, difficulty: Difficulty) -> Optional[int]:
        """
        Get a move for the current position.

        Args:
            board: Current board. It is never modified.
            difficulty: Which algorithm to use.

        Returns:
            Cell index to play, or None if the board is full.
        """
        if not get_empty_cells(board):
            return None

        if difficulty == Difficulty.EASY:
            move = self.get_random_move(board)
        elif difficulty == Difficulty.MEDIUM:
            move = self.get_medium_move(board)
        elif difficulty == Difficulty.HARD:
            move = self.get_hard_move(board)
        else:
            move = self.get_minimax_move(board)

        if self.verbose:
            print(f"AI ({self.player.value}, {difficulty.value}) plays {move}")

        return move

    def get_random_move(self, board: Board) -> Optional[int]:
        """Pick any empty cell, uniformly at random."""
        return self._choose(get_empty_cells(board))

    def get_medium_move(self, board: Board) -> Optional[int]:
        """Take a win, else block, else play randomly."""
        move = self.find_tactical_move(board)
        if move is not None:
            return move
        return self.get_random_move(board)

    def get_hard_move(self, board: Board) -> Optional[int]:
        """Take a win, else block, else center, else a corner, else random."""
        move = self.find_tactical_move(board)
        if move is not None:
            return move

        if board[CENTER] is None:
            return CENTER

        corners = [index for index in CORNERS if board[index] is None]
        if corners:
            return self._choose(corners)

        return self.get_random_move(board)

    def find_tactical_move(self, board: Board) -> Optional[int]:
        """
        Look one ply ahead for a forced move.

        Args:
            board: Current board.

        Returns:
            The lowest cell that wins for the AI, else the lowest cell
            that stops the opponent winning, else None.
        """
        winning = self._find_winning_cell(board, self.player)
        if winning is not None:
            return winning
        return self._find_winning_cell(board, self.opponent)

    def _find_winning_cell(self, board: Board, player: Player) -> Optional[int]:
        """Lowest empty cell that completes a line for player."""
        scratch = list(board)
        for index in get_empty_cells(scratch):
            scratch[index] = player
            winner = self.win_checker.check_winner(scratch)
            scratch[index] = None
            if winner == player:
                return index
        return None

    def get_minimax_move(self, board: Board) -> Optional[int]:
        """
        Get the best move by searching every reachable position.

        Args:
            board: Current board.

        Returns:
            The lowest cell with the highest minimax score, or None if
            no moves are available.
        """
        self.moves_evaluated = 0

        # One scratch board shared by the whole search; every placement
        # is undone before the next cell is tried
        scratch = list(board)
        best_score = float('-inf')
        best_move = None

        for index in get_empty_cells(scratch):
            scratch[index] = self.player
            score = self._minimax(scratch, depth=0, is_maximizing=False)
            scratch[index] = None

            if score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Minimax without pruning.

        Args:
            board: Scratch board, restored before returning.
            depth: Plies played since the root move.
            is_maximizing: True if it is the AI's turn.

        Returns:
            The score of the position. Wins score higher the sooner
            they come, losses score higher the later they come.
        """
        self.moves_evaluated += 1

        outcome = self.win_checker.check_outcome(board)
        if outcome.status == OutcomeStatus.WON:
            if outcome.winner == self.player:
                return WIN_SCORE - depth
            return depth - WIN_SCORE
        if outcome.status == OutcomeStatus.DRAW:
            return 0

        if is_maximizing:
            best_score = float('-inf')
            for index in get_empty_cells(board):
                board[index] = self.player
                best_score = max(best_score, self._minimax(board, depth + 1, False))
                board[index] = None
        else:
            best_score = float('inf')
            for index in get_empty_cells(board):
                board[index] = self.opponent
                best_score = min(best_score, self._minimax(board, depth + 1, True))
                board[index] = None

        return best_score

    def _choose(self, cells: List[int]) -> Optional[int]:
        if not cells:
            return None
        return cells[int(self.rng.integers(len(cells)))]


def select_ai_move(
    board: Board,
    difficulty: Difficulty,
    ai_mark: Player,
    rng: Optional[np.random.Generator] = None
) -> Optional[int]:
    """
    Choose the AI's next cell.

    Args:
        board: Current board.
        difficulty: Which algorithm to use.
        ai_mark: The mark the AI plays.
        rng: Optional random source, for reproducible Easy/Hard play.

    Returns:
        Cell index to play, or None when the board is full.
    """
    return AIPlayer(ai_mark, rng=rng).get_move(board, difficulty)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    X, O = Player.X, Player.O
    ai = AIPlayer(O, verbose=True)

    # Test 1: AI should take the win at 2
    board = [O, O, None,
             X, X, None,
             None, None, None]
    move = ai.get_move(board, Difficulty.MEDIUM)
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    # Test 2: AI should block at 2
    board = [X, X, None,
             None, O, None,
             None, None, None]
    move = ai.get_move(board, Difficulty.IMPOSSIBLE)
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    print("\nAIPlayer test done!")
