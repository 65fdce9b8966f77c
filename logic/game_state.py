"""
Game state management for TicTacToe.
Tracks the board, current player, move history and outcome.
"""

from typing import Optional, List
from dataclasses import dataclass, field
from .board import Board, Player, new_board, get_empty_cells, format_board
from .move_validator import InvalidMove, apply_move
from .win_checker import GameOutcome, check_outcome


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Ply number, starting at 0


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player (X moves first)
    - Move history
    - Outcome after the last move
    """

    board: Board = field(default_factory=new_board)
    current_player: Player = Player.X
    moves: List[Move] = field(default_factory=list)
    outcome: GameOutcome = field(default_factory=GameOutcome.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def is_draw(self) -> bool:
        return self.outcome.is_draw

    @property
    def winning_combination(self):
        return self.outcome.combination

    def make_move(self, index: int) -> GameOutcome:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The outcome after the move.

        Raises:
            InvalidMove: the game is over, or the cell is invalid or taken.
        """
        if self.is_game_over:
            raise InvalidMove(index, "Game is already over!")

        self.board = apply_move(self.board, index, self.current_player)
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        self.outcome = check_outcome(self.board)

        # The winner stays current so callers can read who just moved
        if not self.outcome.is_over:
            self.current_player = self.current_player.opposite()

        return self.outcome

    def get_empty_cells(self) -> List[int]:
        return get_empty_cells(self.board)

    def reset(self):
        """Clear the board for a new game."""
        self.board = new_board()
        self.current_player = Player.X
        self.moves = []
        self.outcome = GameOutcome.in_progress()

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            outcome=self.outcome
        )

    def print_board(self):
        """Print the board to console."""
        print()
        print(format_board(self.board, show_indices=not self.is_game_over))

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # X takes the left column
    for index in [0, 4, 3, 8, 6]:
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.print_board()

    assert game.winner == Player.X

    print("\nGame state test done!")
