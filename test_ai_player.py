"""
Tests for the AI player at every difficulty.
"""

import numpy as np
import pytest

from logic.ai_player import AIPlayer, Difficulty, CORNERS, select_ai_move
from logic.board import Player, new_board, get_empty_cells
from logic.game_state import GameState
from logic.win_checker import OutcomeStatus

X, O, _ = Player.X, Player.O, None

FULL_BOARD = [X, O, X,
              X, O, O,
              O, X, X]


def make_ai(player=O, seed=0):
    return AIPlayer(player, rng=np.random.default_rng(seed))


# ==================== DIFFICULTY ====================

@pytest.mark.parametrize("name, expected", [
    ("easy", Difficulty.EASY),
    ("Hard", Difficulty.HARD),
    (" IMPOSSIBLE ", Difficulty.IMPOSSIBLE),
    ("nightmare", Difficulty.MEDIUM),
])
def test_difficulty_from_name(name, expected):
    assert Difficulty.from_name(name) == expected


# ==================== ALL LEVELS ====================

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_has_no_move(difficulty):
    assert select_ai_move(FULL_BOARD, difficulty, O) is None


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_only_empty_cells_are_chosen(difficulty):
    board = [X, O, X,
             _, O, _,
             O, X, X]
    move = select_ai_move(board, difficulty, X, rng=np.random.default_rng(3))
    assert move in get_empty_cells(board)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_board_is_not_modified(difficulty):
    board = [X, _, _,
             _, O, _,
             _, _, X]
    before = list(board)
    make_ai().get_move(board, difficulty)
    assert board == before


# ==================== EASY ====================

def test_easy_can_pick_every_empty_cell():
    ai = make_ai(seed=42)
    board = [X, _, _,
             _, O, _,
             _, _, _]
    seen = {ai.get_move(board, Difficulty.EASY) for _ in range(300)}
    assert seen == set(get_empty_cells(board))


def test_easy_is_roughly_uniform():
    ai = make_ai(seed=7)
    board = new_board()
    counts = np.bincount(
        [ai.get_move(board, Difficulty.EASY) for _ in range(9000)],
        minlength=9
    )
    assert counts.min() > 800
    assert counts.max() < 1200


# ==================== MEDIUM / HARD ====================

@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD, Difficulty.IMPOSSIBLE])
def test_takes_immediate_win(difficulty):
    board = [O, O, _,
             X, X, _,
             _, _, _]
    assert select_ai_move(board, difficulty, O) == 2


@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
def test_win_preferred_over_block(difficulty):
    # X threatens 2, O can win at 5
    board = [X, X, _,
             O, O, _,
             _, _, _]
    assert select_ai_move(board, difficulty, O) == 5


@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD, Difficulty.IMPOSSIBLE])
def test_blocks_opponent_win(difficulty):
    board = [X, X, _,
             _, O, _,
             _, _, _]
    assert select_ai_move(board, difficulty, O) == 2


def test_lowest_winning_cell_first():
    # O wins at 2 (top row) and at 6 (left column)
    board = [O, O, _,
             O, X, X,
             _, X, _]
    assert make_ai().find_tactical_move(board) == 2


def test_tactical_check_for_x():
    ai = make_ai(player=X)
    board = [O, O, _,
             X, X, _,
             _, _, _]
    # X wins at 5 before blocking at 2
    assert ai.find_tactical_move(board) == 5


def test_tactical_check_finds_nothing():
    assert make_ai().find_tactical_move(new_board()) is None


def test_hard_takes_center_on_empty_board():
    assert select_ai_move(new_board(), Difficulty.HARD, O) == 4


def test_hard_takes_corner_when_center_taken():
    ai = make_ai(seed=5)
    board = [_, _, _,
             _, X, _,
             _, _, _]
    moves = {ai.get_move(board, Difficulty.HARD) for _ in range(200)}
    assert moves == set(CORNERS)


def test_hard_falls_back_to_random_edge():
    # Center and corners gone, no line can be finished
    board = [X, _, O,
             O, X, X,
             X, _, O]
    ai = make_ai(seed=11)
    moves = {ai.get_hard_move(board) for _ in range(100)}
    assert moves == {1, 7}


# ==================== IMPOSSIBLE ====================

def test_minimax_answers_center_with_first_corner():
    board = [_, _, _,
             _, X, _,
             _, _, _]
    ai = make_ai()
    assert ai.get_move(board, Difficulty.IMPOSSIBLE) == 0
    assert ai.moves_evaluated > 0


def test_minimax_prefers_faster_win():
    # O can win now at 8, or set up a later win elsewhere
    board = [O, X, X,
             _, O, _,
             _, X, _]
    assert make_ai().get_minimax_move(board) == 8


def test_minimax_scores_by_depth():
    ai = make_ai()
    won = [O, O, O,
           X, X, _,
           X, _, _]
    lost = [X, X, X,
            O, O, _,
            _, _, _]
    assert ai._minimax(list(won), depth=2, is_maximizing=False) == 8
    assert ai._minimax(list(lost), depth=3, is_maximizing=True) == -7
    assert ai._minimax(list(FULL_BOARD), depth=8, is_maximizing=True) == 0


def _count_ai_losses(ai_player):
    """
    Play the AI against every possible opponent strategy.

    Returns:
        (games, losses) over the whole game tree.
    """
    ai = AIPlayer(ai_player)
    responses = {}
    totals = {"games": 0, "losses": 0}

    def explore(state):
        if state.is_game_over:
            totals["games"] += 1
            if state.outcome.status == OutcomeStatus.WON and state.winner != ai_player:
                totals["losses"] += 1
            return

        if state.current_player == ai_player:
            key = tuple(state.board)
            if key not in responses:
                responses[key] = ai.get_move(state.board, Difficulty.IMPOSSIBLE)
            child = state.copy()
            child.make_move(responses[key])
            explore(child)
            return

        for index in state.get_empty_cells():
            child = state.copy()
            child.make_move(index)
            explore(child)

    explore(GameState())
    return totals["games"], totals["losses"]


def test_minimax_never_loses_playing_second():
    games, losses = _count_ai_losses(O)
    assert games > 0
    assert losses == 0


def test_minimax_never_loses_playing_first():
    games, losses = _count_ai_losses(X)
    assert games > 0
    assert losses == 0
