"""
Logic module for TicTacToe.
Handles the board, rules, and AI opponent.
"""

from .board import Board, Player, BOARD_SIZE, new_board, get_empty_cells, format_board
from .win_checker import WINNING_COMBINATIONS, GameOutcome, OutcomeStatus, WinChecker, check_outcome
from .move_validator import InvalidMove, MoveValidator, ValidationResult, apply_move
from .game_state import GameState, Move
from .ai_player import AIPlayer, Difficulty, select_ai_move
