"""Four in a row board kept as one bit mask per side."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

ROWS = 6
COLUMNS = 7
BOARD_SIZE = ROWS * COLUMNS
WIN_LENGTH = 4


class Side(Enum):
    """The colour of a player's discs."""

    RED = 0
    YELLOW = 1

    def other(self) -> Side:
        """The opposing side."""
        return Side.YELLOW if self is Side.RED else Side.RED

    @property
    def sprite_index(self) -> int:
        """Index of this side's disc picture in the disc sheet."""
        return 1 if self is Side.RED else 2

    def __str__(self) -> str:
        return "Red" if self is Side.RED else "Yellow"


def square_to_index(row: int, column: int) -> int:
    """Bit index of the square at ``row`` (counted from the bottom) and ``column``."""
    return row * COLUMNS + column


def _line(cells) -> int:
    mask = 0
    for row, column in cells:
        mask |= 1 << square_to_index(row, column)
    return mask


def generate_lines(n: int) -> list[int]:
    """Every straight line of ``n`` squares: rows, columns, diagonals, anti-diagonals."""
    if not 1 <= n <= min(ROWS, COLUMNS):
        raise ValueError(f"line length {n} outside 1..{min(ROWS, COLUMNS)}")
    steps = range(n)
    horizontal = [
        _line((row, column + i) for i in steps)
        for row in range(ROWS)
        for column in range(COLUMNS - n + 1)
    ]
    vertical = [
        _line((row + i, column) for i in steps)
        for row in range(ROWS - n + 1)
        for column in range(COLUMNS)
    ]
    diagonal = [
        _line((row + i, column + i) for i in steps)
        for row in range(ROWS - n + 1)
        for column in range(COLUMNS - n + 1)
    ]
    anti_diagonal = [
        _line((row + i, column - i) for i in steps)
        for row in range(ROWS - n + 1)
        for column in range(n - 1, COLUMNS)
    ]
    return horizontal + vertical + diagonal + anti_diagonal


WINNING_LINES: tuple[int, ...] = tuple(generate_lines(WIN_LENGTH))
"""Every line of four, as a mask of squares, in the order they are checked."""


class Progress(Enum):
    """Whether the game goes on and how it ended."""

    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    WIN = "win"


@dataclass(frozen=True)
class WinInfo:
    """Who won and along which line."""

    player: Side
    line: int


@dataclass(frozen=True)
class Status:
    """The state of a game; ``win`` is set only for a win."""

    progress: Progress
    win: WinInfo | None = None


@dataclass(frozen=True)
class Board:
    """An immutable position; equality and hashing ignore ``last_move``."""

    red: int = 0
    yellow: int = 0
    side_to_move: Side = Side.RED
    last_move: tuple[int, int] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.red & self.yellow:
            raise ValueError("a square cannot hold discs of both sides")
        if (self.red | self.yellow) >> BOARD_SIZE:
            raise ValueError("mask has bits outside the board")

    def pieces(self, side: Side) -> int:
        """The mask of squares held by ``side``."""
        return self.red if side is Side.RED else self.yellow

    def get(self, square: int) -> Side | None:
        """The side holding ``square``, if any."""
        for side in Side:
            if self.pieces(side) & (1 << square):
                return side
        return None

    def make_move(self, column: int) -> Board:
        """Return the board after the side to move drops a disc in ``column``."""
        if not 0 <= column < COLUMNS:
            raise ValueError(f"column {column} outside 0..{COLUMNS - 1}")
        filled = self.complete_board()
        row = next(
            (r for r in range(ROWS) if not filled & (1 << square_to_index(r, column))),
            None,
        )
        if row is None:
            raise ValueError(f"column {column} is full")
        bit = 1 << square_to_index(row, column)
        side = self.side_to_move
        return Board(
            red=self.red | bit if side is Side.RED else self.red,
            yellow=self.yellow | bit if side is Side.YELLOW else self.yellow,
            side_to_move=side.other(),
            last_move=(row, column),
        )

    def complete_board(self) -> int:
        """The mask of every occupied square."""
        return self.red | self.yellow

    def possible_moves(self) -> list[int]:
        """Columns whose top square is still empty, in order."""
        filled = self.complete_board()
        return [
            column
            for column in range(COLUMNS)
            if not filled & (1 << square_to_index(ROWS - 1, column))
        ]

    def status(self) -> Status:
        """Win, draw or still in progress."""
        for line in WINNING_LINES:
            for side in Side:
                if self.pieces(side) & line == line:
                    return Status(Progress.WIN, WinInfo(side, line))
        if self.complete_board().bit_count() == BOARD_SIZE:
            return Status(Progress.DRAW)
        return Status(Progress.IN_PROGRESS)

    def __str__(self) -> str:
        symbols = {Side.RED: "R ", Side.YELLOW: "Y ", None: ". "}
        lines = []
        for row in reversed(range(ROWS)):
            cells = "".join(
                symbols[self.get(square_to_index(row, column))]
                for column in range(COLUMNS)
            )
            lines.append(f"{row} {cells}\n")
        lines.append("  " + "".join(f"{column} " for column in range(COLUMNS)) + "\n")
        return "".join(lines)