"""
Configuration for the TicTacToe game.
Defaults, persisted player settings, and the file they live in.
"""

import json
import os
from dataclasses import dataclass, asdict
from typing import Optional

from logic.ai_player import Difficulty
from logic.board import Player


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the game!
    """

    # ==================== PLAYERS ====================
    # X always moves first. In AI mode the human plays X.
    HUMAN_MARK = Player.X
    AI_MARK = Player.O

    # ==================== DEFAULT SETTINGS ====================
    DEFAULT_DIFFICULTY = Difficulty.MEDIUM
    DEFAULT_ANIMATIONS = True
    DEFAULT_SOUNDS = True

    # ==================== SETTINGS FILE ====================
    # Where saved settings go (JSON)
    SETTINGS_DIR = os.path.join(os.path.expanduser("~"), ".tictactoe")
    SETTINGS_FILE = "settings.json"

    # ==================== TIMING (milliseconds) ====================
    AI_MOVE_DELAY_MS = 500       # Pause before the AI answers
    FLASH_INTERVAL_MS = 150      # Winning cell flash speed
    FLASH_COUNT = 6              # Number of flash toggles
    NOTIFICATION_MS = 3000       # How long status notices stay up

    # ==================== UI COLORS ====================
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    X_COLOR = '#667eea'
    O_COLOR = '#f093fb'
    WIN_COLOR = '#10b981'
    DIFFICULTY_COLORS = {
        Difficulty.EASY: '#4ade80',
        Difficulty.MEDIUM: '#fbbf24',
        Difficulty.HARD: '#f87171',
        Difficulty.IMPOSSIBLE: '#a855f7',
    }

    @classmethod
    def settings_path(cls) -> str:
        return os.path.join(cls.SETTINGS_DIR, cls.SETTINGS_FILE)


@dataclass
class Settings:
    """Player settings that survive between sessions."""
    difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY
    animations: bool = GameConfig.DEFAULT_ANIMATIONS
    sounds: bool = GameConfig.DEFAULT_SOUNDS

    def to_dict(self) -> dict:
        data = asdict(self)
        data["difficulty"] = self.difficulty.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """
        Build settings from saved data, on top of the defaults.

        Unknown keys are ignored and an unknown difficulty becomes MEDIUM.
        """
        settings = cls()
        if "difficulty" in data:
            settings.difficulty = Difficulty.from_name(data["difficulty"])
        if "animations" in data:
            settings.animations = bool(data["animations"])
        if "sounds" in data:
            settings.sounds = bool(data["sounds"])
        return settings


class SettingsStore:
    """
    Loads and saves Settings as a JSON file.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: Settings file. Defaults to GameConfig.settings_path().
        """
        self.path = path or GameConfig.settings_path()

    def load(self) -> Settings:
        """
        Load settings, falling back to defaults.

        Returns:
            Saved settings merged over the defaults.
        """
        if not os.path.exists(self.path):
            return Settings()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Warning: could not read settings from {self.path}: {e}")
            return Settings()

        if not isinstance(data, dict):
            print(f"Warning: ignoring malformed settings in {self.path}")
            return Settings()

        return Settings.from_dict(data)

    def save(self, settings: Settings):
        """Write settings to disk, creating the folder if needed."""
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
