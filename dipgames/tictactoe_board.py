"""Noughts and crosses board kept as a pair of nine-bit masks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

SIZE = 9
"""Number of squares on the board."""

EMPTY = 0

WINS: tuple[int, ...] = (
    0b111000000,
    0b000111000,
    0b000000111,
    0b100100100,
    0b010010010,
    0b001001001,
    0b100010001,
    0b001010100,
)
"""Every line of three, as a mask of squares."""


class Side(Enum):
    """A player's mark."""

    X = 0
    O = 1

    def other(self) -> Side:
        """The opposing side."""
        return Side.O if self is Side.X else Side.X


class Square(IntEnum):
    """A square of the board, numbered row by row from A1."""

    A1 = 0
    B1 = 1
    C1 = 2
    A2 = 3
    B2 = 4
    C2 = 5
    A3 = 6
    B3 = 7
    C3 = 8

    @property
    def mask(self) -> int:
        """The single-bit mask of this square."""
        return 1 << self.value


class Progress(Enum):
    """Whether the game goes on and how it ended."""

    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    WIN = "win"


@dataclass(frozen=True)
class WinInfo:
    """Who won and along which line."""

    side: Side
    line: int


@dataclass(frozen=True)
class Status:
    """The state of a game; ``win`` is set only for a win."""

    progress: Progress
    win: WinInfo | None = None


@dataclass(frozen=True)
class Board:
    """An immutable position: the marks of each side and whose turn it is."""

    x: int = EMPTY
    o: int = EMPTY
    side_to_move: Side = Side.X

    def pieces(self, side: Side) -> int:
        """The mask of squares held by ``side``."""
        return self.x if side is Side.X else self.o

    @property
    def filled(self) -> int:
        """The mask of every occupied square."""
        return self.x | self.o

    def make_move(self, square: int) -> Board:
        """Return the board after the side to move marks ``square``."""
        square = Square(square)
        if self.filled & square.mask:
            raise ValueError(f"square {square.name} is already taken")
        side = self.side_to_move
        x = self.x | square.mask if side is Side.X else self.x
        o = self.o | square.mask if side is Side.O else self.o
        return Board(x=x, o=o, side_to_move=side.other())

    def possible_moves(self) -> list[Square]:
        """Empty squares in order, or none once someone has won."""
        if self.win_position():
            return []
        filled = self.filled
        return [square for square in Square if not filled & square.mask]

    def win_position(self) -> bool:
        """True if either side holds a full line."""
        return any(
            bits & line == line for bits in (self.x, self.o) for line in WINS
        )

    def status(self) -> Status:
        """Win, draw or still in progress."""
        for side in Side:
            bits = self.pieces(side)
            for line in WINS:
                if bits & line == line:
                    return Status(Progress.WIN, WinInfo(side, line))
        if not self.possible_moves():
            return Status(Progress.DRAW)
        return Status(Progress.IN_PROGRESS)

    def get_square(self, square: int) -> Side | None:
        """The side holding ``square``, if any."""
        mask = Square(square).mask
        for side in Side:
            if self.pieces(side) & mask:
                return side
        return None

    def __str__(self) -> str:
        parts = []
        for square in Square:
            side = self.get_square(square)
            parts.append(side.name if side is not None else " ")
            if square % 3 != 2:
                parts.append(" | ")
            elif square != SIZE - 1:
                parts.append("\n---------\n")
        return "".join(parts)