"""Higher or lower: guess a hidden number with a few tries and hints."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from dipgames.outcomes import MiniGameResult, MoodCategory

GUESS_COUNT = 3
"""Number of guesses the player gets."""

MAX_NUMBER = 15
"""Buttons are offered for the numbers 0 up to, but not including, this."""

TARGET_LIMIT = 10
"""The hidden number is drawn from 0 up to, but not including, this."""


class GuessValue(Enum):
    """The hint given after the last guess."""

    NONE = "none"
    HIGHER = "higher"
    LOWER = "lower"
    EQUAL = "equal"


class ButtonState(Enum):
    """How a number button is shown."""

    ACTIVE = "active"
    CORRECT = "correct"
    GUESSED = "guessed"
    UNGUESSED = "unguessed"


class GuessError(ValueError):
    """Raised for a guess the game cannot accept."""


@dataclass
class HigherLowerGame:
    """State of one round of higher or lower."""

    target: int
    value: GuessValue = GuessValue.NONE
    count: int = 0
    guessed: set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        if not 0 <= self.target < MAX_NUMBER:
            raise ValueError(f"target {self.target} outside 0..{MAX_NUMBER - 1}")

    @property
    def remaining(self) -> int:
        """Guesses still available."""
        return GUESS_COUNT - self.count

    def guess(self, number: int) -> GuessValue:
        """Make a guess and return the hint it earns."""
        if self.is_over():
            raise GuessError("the game is already over")
        if not 0 <= number < MAX_NUMBER:
            raise GuessError(f"number {number} outside 0..{MAX_NUMBER - 1}")
        if number in self.guessed:
            raise GuessError(f"number {number} was already guessed")

        self.guessed.add(number)
        if self.target < number:
            self.value = GuessValue.LOWER
        elif self.target > number:
            self.value = GuessValue.HIGHER
        else:
            self.value = GuessValue.EQUAL
        self.count += 1
        return self.value

    def is_over(self) -> bool:
        """True once the number is found or the guesses are used up."""
        return self.value is GuessValue.EQUAL or self.count >= GUESS_COUNT

    def mood(self) -> MoodCategory:
        """The mood the watching pet shows."""
        if self.value is GuessValue.NONE:
            return MoodCategory.NEUTRAL
        if self.value is GuessValue.EQUAL:
            return MoodCategory.ECSTATIC
        if self.remaining == 0:
            return MoodCategory.DESPAIRING
        if self.remaining in (1, 2):
            return MoodCategory.SAD
        return MoodCategory.NEUTRAL

    def sign_index(self) -> int:
        """Index of the picture on the pet's sign."""
        if self.remaining == 0:
            return 3 if self.value is GuessValue.EQUAL else 4
        return {
            GuessValue.NONE: 0,
            GuessValue.HIGHER: 1,
            GuessValue.LOWER: 2,
            GuessValue.EQUAL: 3,
        }[self.value]

    def button_state(self, number: int) -> ButtonState:
        """How the button for ``number`` is shown."""
        if not 0 <= number < MAX_NUMBER:
            raise ValueError(f"number {number} outside 0..{MAX_NUMBER - 1}")
        if number not in self.guessed and not self.is_over():
            return ButtonState.ACTIVE
        if number == self.target:
            return ButtonState.CORRECT
        if number in self.guessed:
            return ButtonState.GUESSED
        return ButtonState.UNGUESSED

    def result(self) -> MiniGameResult:
        """The outcome reported when the game is left."""
        if self.value is GuessValue.NONE:
            return MiniGameResult.INCOMPLETE
        if self.value is GuessValue.EQUAL:
            return MiniGameResult.WIN
        return MiniGameResult.LOSE


def new_game(rng: random.Random) -> HigherLowerGame:
    """Start a game with a hidden number drawn from ``rng``."""
    return HigherLowerGame(target=rng.randrange(TARGET_LIMIT))


def shuffled_numbers(rng: random.Random) -> list[int]:
    """The button numbers in the random order they are laid out."""
    numbers = list(range(MAX_NUMBER))
    rng.shuffle(numbers)
    return numbers