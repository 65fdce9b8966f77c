"""
Tests for the TicTacToe rules: board, win checker, move validator and
game state.
"""

import itertools

import pytest

from logic.board import Player, new_board, get_empty_cells, format_board
from logic.game_state import GameState
from logic.move_validator import InvalidMove, MoveValidator, apply_move
from logic.win_checker import (
    WINNING_COMBINATIONS,
    GameOutcome,
    OutcomeStatus,
    WinChecker,
    check_outcome,
)

X, O, _ = Player.X, Player.O, None


def has_line(board):
    return any(
        board[a] is not None and board[a] == board[b] == board[c]
        for a, b, c in WINNING_COMBINATIONS
    )


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = new_board()
    assert board == [None] * 9
    assert get_empty_cells(board) == list(range(9))


def test_format_board():
    board = [X, _, _,
             _, O, _,
             _, _, _]
    text = format_board(board, show_indices=True)
    assert text.splitlines()[0] == " X | 2 | 3"
    assert text.splitlines()[2] == " 4 | O | 6"


def test_player_opposite():
    assert X.opposite() == O
    assert O.opposite() == X


# ==================== WIN CHECKER ====================

def test_winning_combinations_table():
    assert len(WINNING_COMBINATIONS) == 8
    assert WINNING_COMBINATIONS[0] == (0, 1, 2)
    assert WINNING_COMBINATIONS[-1] == (2, 4, 6)


@pytest.mark.parametrize("line", WINNING_COMBINATIONS)
def test_every_line_wins(line):
    board = new_board()
    for index in line:
        board[index] = O

    outcome = check_outcome(board)

    assert outcome.status == OutcomeStatus.WON
    assert outcome.winner == O
    assert outcome.combination == line


def test_empty_board_in_progress():
    assert check_outcome(new_board()) == GameOutcome.in_progress()


def test_full_board_without_line_is_draw():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    outcome = check_outcome(board)
    assert outcome.is_draw
    assert outcome.winner is None
    assert outcome.combination is None


def test_win_on_full_board_beats_draw():
    board = [X, O, X,
             O, X, O,
             O, X, X]
    outcome = check_outcome(board)
    assert outcome.winner == X
    assert outcome.combination == (0, 4, 8)


def test_first_line_in_table_order_is_reported():
    board = [X, X, X,
             X, O, O,
             X, O, O]
    assert check_outcome(board).combination == (0, 1, 2)


def test_outcome_matches_lines_for_all_boards():
    """Every placement of up to 5 X and 4 O marks."""
    for cells in itertools.product((None, X, O), repeat=9):
        board = list(cells)
        x_count, o_count = board.count(X), board.count(O)
        if not 0 <= x_count - o_count <= 1:
            continue

        outcome = check_outcome(board)
        if has_line(board):
            assert outcome.status == OutcomeStatus.WON
            a, b, c = outcome.combination
            assert board[a] == board[b] == board[c] == outcome.winner
        elif None in board:
            assert outcome.status == OutcomeStatus.IN_PROGRESS
        else:
            assert outcome.status == OutcomeStatus.DRAW


def test_win_checker_queries():
    checker = WinChecker()
    board = [_, _, O,
             X, O, X,
             O, _, X]
    assert checker.check_winner(board) == O
    assert checker.get_winning_line(board) == (2, 4, 6)
    assert not checker.check_draw(board)


def test_check_outcome_does_not_modify_board():
    board = [X, O, _, _, X, _, _, _, _]
    before = list(board)
    check_outcome(board)
    assert board == before


# ==================== MOVE VALIDATOR ====================

def test_apply_move_returns_new_board():
    board = new_board()
    result = apply_move(board, 4, X)
    assert result[4] == X
    assert board[4] is None


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 1.0, None, True])
def test_apply_move_rejects_bad_index(index):
    with pytest.raises(InvalidMove) as excinfo:
        apply_move(new_board(), index, X)
    assert excinfo.value.index == index


def test_apply_move_rejects_occupied_cell():
    board = apply_move(new_board(), 0, X)
    with pytest.raises(InvalidMove, match="occupied"):
        apply_move(board, 0, O)


def test_apply_move_twice_fails_second_time():
    board = apply_move(new_board(), 7, O)
    for player in Player:
        with pytest.raises(InvalidMove):
            apply_move(board, 7, player)


def test_invalid_move_is_value_error():
    assert issubclass(InvalidMove, ValueError)


def test_validator_result():
    validator = MoveValidator()
    board = [X, _, _, _, _, _, _, _, _]

    assert validator.validate_move(board, 1).is_valid
    result = validator.validate_move(board, 0)
    assert not result.is_valid
    assert "occupied" in result.error_message
    assert validator.get_valid_moves(board) == [1, 2, 3, 4, 5, 6, 7, 8]


# ==================== GAME STATE ====================

def test_game_sequence_to_x_win():
    """X@0, O@4, X@1, O@8, X@2: X takes the top row."""
    game = GameState()
    plies = [(0, X), (4, O), (1, X), (8, O)]
    for index, player in plies:
        assert game.current_player == player
        outcome = game.make_move(index)
        assert outcome.status == OutcomeStatus.IN_PROGRESS

    outcome = game.make_move(2)
    assert outcome.winner == X
    assert outcome.combination == (0, 1, 2)
    assert game.is_game_over
    assert [m.index for m in game.moves] == [0, 4, 1, 8, 2]


def test_game_sequence_to_draw():
    game = GameState()
    for index in [0, 4, 8, 1, 7, 6, 2, 5]:
        assert game.make_move(index).status == OutcomeStatus.IN_PROGRESS

    outcome = game.make_move(3)
    assert outcome.is_draw
    assert game.is_draw
    assert game.winner is None


def test_game_rejects_moves_after_win():
    game = GameState()
    for index in [0, 3, 1, 4, 2]:
        game.make_move(index)

    with pytest.raises(InvalidMove, match="over"):
        game.make_move(8)
    assert len(game.moves) == 5


def test_game_rejected_move_keeps_turn():
    game = GameState()
    game.make_move(4)
    with pytest.raises(InvalidMove):
        game.make_move(4)
    assert game.current_player == O
    assert len(game.moves) == 1


def test_game_reset_and_copy():
    game = GameState()
    game.make_move(0)
    clone = game.copy()
    clone.make_move(1)
    assert game.board[1] is None

    game.reset()
    assert game.board == new_board()
    assert game.current_player == X
    assert game.moves == []
    assert not game.is_game_over
