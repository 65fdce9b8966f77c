"""
Self-play runner.
Pits the AI against a random opponent and tallies the results.
"""

from typing import Callable, Optional

import numpy as np

from logic.ai_player import AIPlayer, Difficulty
from logic.board import Board, Player, get_empty_cells
from logic.game_state import GameState
from .scoreboard import Scoreboard

# Picks a cell for the given board
MoveChooser = Callable[[Board], Optional[int]]


class RandomOpponent:
    """Plays any empty cell, uniformly at random."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def __call__(self, board: Board) -> Optional[int]:
        empty_cells = get_empty_cells(board)
        if not empty_cells:
            return None
        return empty_cells[int(self.rng.integers(len(empty_cells)))]


def play_game(choose_x: MoveChooser, choose_o: MoveChooser) -> GameState:
    """
    Play one game to the end.

    Args:
        choose_x: Picks X's moves.
        choose_o: Picks O's moves.

    Returns:
        The finished game.
    """
    state = GameState()
    while not state.is_game_over:
        chooser = choose_x if state.current_player == Player.X else choose_o
        move = chooser(state.board)
        if move is None:
            break
        state.make_move(move)
    return state


def run_self_play(
    games: int,
    difficulty: Difficulty = Difficulty.IMPOSSIBLE,
    ai_first: bool = False,
    seed: Optional[int] = None
) -> Scoreboard:
    """
    Play the AI against a random opponent several times.

    Args:
        games: Number of games.
        difficulty: AI difficulty.
        ai_first: AI plays X and moves first; otherwise the AI plays O.
        seed: Seed for both the AI and the opponent.

    Returns:
        Tallies by mark. The AI's losses are the wins of the other mark.
    """
    rng = np.random.default_rng(seed)
    ai_mark = Player.X if ai_first else Player.O
    ai = AIPlayer(ai_mark, rng=rng)
    opponent = RandomOpponent(rng)

    def ai_chooser(board: Board) -> Optional[int]:
        return ai.get_move(board, difficulty)

    scoreboard = Scoreboard()
    for _ in range(games):
        if ai_first:
            state = play_game(ai_chooser, opponent)
        else:
            state = play_game(opponent, ai_chooser)
        scoreboard.record(state.outcome)

    return scoreboard
