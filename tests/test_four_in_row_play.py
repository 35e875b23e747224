import math
import random

import pytest

from dipgames.four_in_row_board import Board, Progress, Side
from dipgames.four_in_row_play import (
    any_move_results_in_win,
    best_moves,
    choose_computer_move,
    evaluate,
    game_result,
    nega_max,
    player_mood,
)
from dipgames.outcomes import MiniGameResult, MoodCategory


class FixedRng:
    """Returns the given values from randrange, in order."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def play(*columns):
    board = Board()
    for column in columns:
        board = board.make_move(column)
    return board


@pytest.fixture(scope="module")
def drawn_board():
    board = Board()
    while board.status().progress is Progress.IN_PROGRESS:
        board = board.make_move(best_moves(board)[0])
    return board


@pytest.fixture
def red_threatens():
    # Red holds columns 0, 1 and 2 on the bottom row and is to move.
    return play(0, 6, 1, 6, 2, 6)


@pytest.fixture
def red_won(red_threatens):
    return red_threatens.make_move(3)


def test_best_moves_blank_board():
    assert best_moves(Board()) == [3]


def test_best_moves_blocks_column():
    board = play(3, 0, 3, 1, 3)
    assert best_moves(board) == [3]


def test_draws(drawn_board):
    assert drawn_board.status().progress is Progress.DRAW


def test_evaluate_blank_is_unknown():
    assert evaluate(Board()) == 0.0


def test_evaluate_lost_for_side_to_move(red_won):
    assert red_won.side_to_move is Side.YELLOW
    assert evaluate(red_won) == -math.inf


def test_nega_max_depth_zero_is_evaluation(red_threatens):
    assert nega_max(red_threatens, 0) == 0.0


def test_nega_max_finds_immediate_win(red_threatens):
    assert nega_max(red_threatens, 1) == math.inf


def test_any_move_results_in_win(red_threatens):
    assert any_move_results_in_win(red_threatens) is Side.RED
    assert any_move_results_in_win(Board()) is None


def test_choose_computer_move_best():
    assert choose_computer_move(Board(), FixedRng(1, 0)) == 3


def test_choose_computer_move_random_branch():
    assert choose_computer_move(Board(), FixedRng(0, 5)) == 5


def test_choose_computer_move_is_legal():
    board = play(3, 3, 2)
    rng = random.Random(7)
    for _ in range(5):
        assert choose_computer_move(board, rng) in board.possible_moves()


def test_choose_computer_move_full_board(drawn_board):
    with pytest.raises(ValueError):
        choose_computer_move(drawn_board, random.Random(1))


def test_player_mood_neutral_on_blank():
    assert player_mood(Board(), Side.RED) is MoodCategory.NEUTRAL


def test_player_mood_threat(red_threatens):
    assert player_mood(red_threatens, Side.RED) is MoodCategory.HAPPY
    assert player_mood(red_threatens, Side.YELLOW) is MoodCategory.SAD


def test_player_mood_after_win(red_won):
    assert player_mood(red_won, Side.RED) is MoodCategory.ECSTATIC
    assert player_mood(red_won, Side.YELLOW) is MoodCategory.DESPAIRING


def test_player_mood_draw(drawn_board):
    assert player_mood(drawn_board, Side.RED) is MoodCategory.SAD


def test_game_result_cases(red_won, drawn_board):
    assert game_result(Board(), Side.RED) is MiniGameResult.INCOMPLETE
    assert game_result(red_won, Side.RED) is MiniGameResult.WIN
    assert game_result(red_won, Side.YELLOW) is MiniGameResult.LOSE
    assert game_result(drawn_board, Side.YELLOW) is MiniGameResult.DRAW