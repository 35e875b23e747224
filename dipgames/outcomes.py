"""Results and pet moods shared by the minigames."""

from enum import Enum


class MiniGameResult(Enum):
    """How a finished (or abandoned) minigame turned out for the player."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"
    INCOMPLETE = "incomplete"


class MoodCategory(Enum):
    """The mood a pet shows while watching a minigame."""

    ECSTATIC = "ecstatic"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    DESPAIRING = "despairing"