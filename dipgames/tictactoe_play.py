"""Playing noughts and crosses against the computer: search, moods and results."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from functools import lru_cache

from dipgames.outcomes import MiniGameResult, MoodCategory
from dipgames.tictactoe_board import Board, Progress, Side, Square, Status

SEARCH_DEPTH = 9
"""Plies searched below each candidate move when picking the best ones."""

RANDOM_MOVE_ODDS = 4
"""One computer move in this many is picked among all legal moves."""


class GameOverError(ValueError):
    """Raised when a move is asked for after the game has ended."""


def evaluate(board: Board) -> int:
    """Score a position for the side to move: 1 won, -1 lost, 0 otherwise."""
    status = board.status()
    if status.win is None:
        return 0
    return 1 if status.win.side is board.side_to_move else -1


@lru_cache(maxsize=None)
def nega_max(board: Board, depth: int) -> int:
    """Best score reachable by the side to move, searching ``depth`` plies."""
    if depth == 0:
        return evaluate(board)
    squares = board.possible_moves()
    if not squares:
        return evaluate(board)
    return max(-nega_max(board.make_move(square), depth - 1) for square in squares)


def best_moves(board: Board) -> list[Square]:
    """Every legal move that shares the best search score, in square order."""
    best: list[Square] = []
    best_rating: int | None = None
    for square in board.possible_moves():
        score = -nega_max(board.make_move(square), SEARCH_DEPTH)
        if best_rating is None or score > best_rating:
            best_rating = score
            best = [square]
        elif score == best_rating:
            best.append(square)
    return best


_MOODS = {
    2: MoodCategory.ECSTATIC,
    1: MoodCategory.HAPPY,
    0: MoodCategory.NEUTRAL,
    -1: MoodCategory.SAD,
    -2: MoodCategory.DESPAIRING,
}


@dataclass
class Game:
    """A game in progress; the human plays X and the computer plays O."""

    board: Board = field(default_factory=Board)

    @property
    def status(self) -> Status:
        """Win, draw or still in progress."""
        return self.board.status()

    def _require_in_progress(self) -> None:
        if self.status.progress is not Progress.IN_PROGRESS:
            raise GameOverError("the game is already over")

    def make_move(self, square: int) -> Status:
        """Mark ``square`` for the side to move and return the new status."""
        self._require_in_progress()
        self.board = self.board.make_move(square)
        return self.status

    def computer_move(self, rng: random.Random) -> Square:
        """Let the computer pick and play a move; return the square it took."""
        self._require_in_progress()
        if rng.randrange(RANDOM_MOVE_ODDS) == 0:
            moves = self.board.possible_moves()
        else:
            moves = best_moves(self.board)
        square = moves[rng.randrange(len(moves))]
        self.make_move(square)
        return square

    def mood(self) -> MoodCategory:
        """The mood of the watching pet, judged from the worst next reply."""
        moves = self.board.possible_moves()
        if moves:
            worst = min(-nega_max(self.board.make_move(square), 1) for square in moves)
        else:
            status = self.status
            if status.win is not None:
                worst = 2 if status.win.side is Side.X else -2
            else:
                worst = 0
        try:
            return _MOODS[worst]
        except KeyError:
            raise ValueError(f"invalid worst score {worst}") from None

    def result(self) -> MiniGameResult:
        """The outcome reported when the game is left."""
        status = self.status
        if status.progress is Progress.DRAW:
            return MiniGameResult.DRAW
        if status.win is not None:
            return MiniGameResult.WIN if status.win.side is Side.X else MiniGameResult.LOSE
        return MiniGameResult.INCOMPLETE