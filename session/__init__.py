"""
Session module for TicTacToe.
Handles settings, scores, and running games against the AI.
"""

from .config import GameConfig, Settings, SettingsStore
from .scoreboard import Scoreboard
from .game_session import GameMode, GameSession
from .self_play import RandomOpponent, play_game, run_self_play
