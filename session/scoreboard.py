"""
Score tallies across games.
"""

from dataclasses import dataclass

from logic.board import Player
from logic.win_checker import GameOutcome


@dataclass
class Scoreboard:
    """Wins per mark, draws and games played."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    games_played: int = 0

    def record(self, outcome: GameOutcome):
        """
        Count a finished game.

        Args:
            outcome: Final outcome. Games still in progress are not counted.
        """
        if not outcome.is_over:
            return

        self.games_played += 1
        if outcome.is_draw:
            self.draws += 1
        elif outcome.winner == Player.X:
            self.x_wins += 1
        else:
            self.o_wins += 1

    def wins_for(self, player: Player) -> int:
        return self.x_wins if player == Player.X else self.o_wins

    @property
    def win_rate(self) -> int:
        """Share of games that had a winner, as a rounded percentage."""
        if self.games_played == 0:
            return 0
        rate = (self.x_wins + self.o_wins) / self.games_played * 100
        # Halves round up
        return int(rate + 0.5)

    def reset(self):
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0
        self.games_played = 0

    def summary(self) -> str:
        return (f"X: {self.x_wins}  O: {self.o_wins}  Draws: {self.draws}  "
                f"Games: {self.games_played}  Win rate: {self.win_rate}%")
