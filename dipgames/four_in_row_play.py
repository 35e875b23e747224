"""Playing four in a row against the computer: search, moods and results."""

from __future__ import annotations

import math
import random
from functools import lru_cache

from dipgames.four_in_row_board import COLUMNS, Board, Progress, Side, Status
from dipgames.outcomes import MiniGameResult, MoodCategory

WIN_EVAL = math.inf
"""Score of a position the side to move has won."""

LOSE_EVAL = -math.inf
"""Score of a position the side to move has lost."""

UNKNOWN_EVAL = 0.0
"""Score of a drawn or undecided position."""

SEARCH_DEPTH = 5
"""Plies searched below each candidate move when picking the best ones."""

RANDOM_MOVE_ODDS = 7
"""One computer move in this many is picked among all legal moves."""


@lru_cache(maxsize=1 << 20)
def _status(board: Board) -> Status:
    return board.status()


def evaluate(board: Board) -> float:
    """Score a position for the side to move: won, lost or unknown."""
    status = _status(board)
    if status.win is None:
        return UNKNOWN_EVAL
    return WIN_EVAL if status.win.player is board.side_to_move else LOSE_EVAL


@lru_cache(maxsize=1 << 20)
def nega_max(board: Board, depth: int) -> float:
    """Best score reachable by the side to move, searching ``depth`` plies."""
    columns = board.possible_moves()
    if depth == 0 or not columns:
        return evaluate(board)
    return max(-nega_max(board.make_move(column), depth - 1) for column in columns)


def any_move_results_in_win(board: Board) -> Side | None:
    """The side to move if one of its moves ends the game with a win."""
    for column in board.possible_moves():
        if _status(board.make_move(column)).progress is Progress.WIN:
            return board.side_to_move
    return None


def best_moves(board: Board) -> list[int]:
    """Columns sharing the best search score; the middle on an empty board."""
    if board.complete_board() == 0:
        return [COLUMNS // 2]

    columns = board.possible_moves()
    best: list[int] = []
    best_score = LOSE_EVAL
    for column in columns:
        score = -nega_max(board.make_move(column), SEARCH_DEPTH)
        if score > best_score:
            best_score = score
            best = [column]
        elif score == best_score:
            best.append(column)
    return best or columns


def choose_computer_move(board: Board, rng: random.Random) -> int:
    """Pick the computer's column, usually among the best, sometimes any legal one."""
    if not board.possible_moves():
        raise ValueError("no column is free")
    if rng.randrange(RANDOM_MOVE_ODDS) != 0:
        moves = best_moves(board)
    else:
        moves = board.possible_moves()
    return moves[rng.randrange(len(moves))]


def player_mood(board: Board, player: Side) -> MoodCategory:
    """The mood of the pet playing ``player``."""
    status = _status(board)
    if status.progress is Progress.DRAW:
        return MoodCategory.SAD
    if status.win is not None:
        if status.win.player is player:
            return MoodCategory.ECSTATIC
        return MoodCategory.DESPAIRING
    if any_move_results_in_win(board) is not None:
        if board.side_to_move is player:
            return MoodCategory.HAPPY
        return MoodCategory.SAD
    return MoodCategory.NEUTRAL


def game_result(board: Board, player: Side) -> MiniGameResult:
    """The outcome reported for ``player`` when the game is left."""
    status = _status(board)
    if status.progress is Progress.DRAW:
        return MiniGameResult.DRAW
    if status.win is not None:
        if status.win.player is player:
            return MiniGameResult.WIN
        return MiniGameResult.LOSE
    return MiniGameResult.INCOMPLETE