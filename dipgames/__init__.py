"""Game logic for higher-lower, tic-tac-toe and four-in-a-row minigames."""

__version__ = "0.1.0"