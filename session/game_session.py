"""
Game session for TicTacToe.
Ties together the game state, the AI opponent, settings and scores.
"""

from enum import Enum
from typing import Callable, Optional

import numpy as np

from logic.ai_player import AIPlayer, Difficulty
from logic.board import Player
from logic.game_state import GameState
from logic.move_validator import InvalidMove
from logic.win_checker import GameOutcome
from .config import GameConfig, Settings
from .scoreboard import Scoreboard


class GameMode(Enum):
    """Who sits on the O side."""
    HUMAN = "human"   # Two humans share the board
    AI = "ai"         # Human plays X, AI plays O


class GameSession:
    """
    Runs games one after another and keeps score.

    Game flow in AI mode:
    1. Human (X) picks a cell
    2. Session applies it and checks for a winner
    3. Front end asks the session for the AI reply (make_ai_move)
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        mode: GameMode = GameMode.AI,
        rng: Optional[np.random.Generator] = None,
        on_game_over: Optional[Callable[[GameOutcome], None]] = None
    ):
        """
        Initialize the session.

        Args:
            settings: Difficulty and toggles. Defaults to Settings().
            mode: Human vs human or human vs AI.
            rng: Random source handed to the AI.
            on_game_over: Called with the final outcome of every game.
        """
        self.settings = settings or Settings()
        self.mode = mode
        self.state = GameState()
        self.scoreboard = Scoreboard()
        self.ai = AIPlayer(GameConfig.AI_MARK, rng=rng)
        self.on_game_over = on_game_over

    @property
    def difficulty(self) -> Difficulty:
        return self.settings.difficulty

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.mode == GameMode.AI
            and not self.state.is_game_over
            and self.state.current_player == self.ai.player
        )

    def make_move(self, index: int) -> bool:
        """
        Play a human move for the current player.

        Invalid requests are ignored: a taken or out-of-range cell, a
        finished game, or a human trying to move for the AI.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played.
        """
        if self.is_ai_turn:
            return False
        return self._play(index)

    def make_ai_move(self) -> Optional[int]:
        """
        Let the AI play its turn.

        Returns:
            The cell the AI played, or None if it is not the AI's turn
            or no move is left.
        """
        if not self.is_ai_turn:
            return None

        move = self.ai.get_move(self.state.board, self.difficulty)
        if move is None:
            return None

        self._play(move)
        return move

    def _play(self, index: int) -> bool:
        try:
            outcome = self.state.make_move(index)
        except InvalidMove:
            return False

        if outcome.is_over:
            self._end_game(outcome)
        return True

    def _end_game(self, outcome: GameOutcome):
        self.scoreboard.record(outcome)
        if self.on_game_over is not None:
            self.on_game_over(outcome)

    def winner_name(self, player: Optional[Player] = None) -> Optional[str]:
        """
        Display name for a player, or for the winner of the current game.

        Returns:
            "Player X", "Player O" or "AI"; None if nobody has won.
        """
        player = player or self.state.winner
        if player is None:
            return None
        if self.mode == GameMode.AI and player == self.ai.player:
            return "AI"
        return f"Player {player.value}"

    def result_message(self) -> Optional[str]:
        """Headline for a finished game, or None while it is running."""
        if not self.state.is_game_over:
            return None
        if self.state.is_draw:
            return "It's a Draw!"
        return f"{self.winner_name()} Wins!"

    def set_mode(self, mode: GameMode):
        """Switch mode and start a fresh board."""
        self.mode = mode
        self.reset_game()

    def set_difficulty(self, difficulty: Difficulty):
        self.settings.difficulty = difficulty

    def reset_game(self):
        """Clear the board; scores are kept."""
        self.state = GameState()

    def new_game(self):
        """Clear the board and the scores."""
        self.reset_game()
        self.scoreboard.reset()
