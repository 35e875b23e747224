# dipgames

Game logic for three small minigames. Each module holds the rules, the
scoring and the computer opponent. None of them holds any display code.

- **Higher or lower** (`dipgames.higher_lower`): the game hides a number
  from 0 to 9. You have at most three guesses, chosen from 0 to 14. After
  each wrong guess the game tells you whether the hidden number is higher
  or lower.
- **Tic-tac-toe** (`dipgames.tictactoe_board`, `dipgames.tictactoe_play`):
  a 3×3 board and a negamax opponent. The human plays X and the computer
  plays O. One computer move in four is a random legal move.
- **Four in a row** (`dipgames.four_in_row_board`, `dipgames.four_in_row_play`):
  a board of 7 columns and 6 rows, and a negamax opponent that searches
  5 plies. One computer move in seven is a random legal move. On an empty
  board it plays the middle column.

Each game reports its outcome as a `dipgames.outcomes.MiniGameResult`:
`WIN`, `LOSE`, `DRAW` or `INCOMPLETE`. Each game also gives the mood of a
watching pet as a `dipgames.outcomes.MoodCategory`: `ECSTATIC`, `HAPPY`,
`NEUTRAL`, `SAD` or `DESPAIRING`. `dipgames.text_keys` holds the
translation-key strings for on-screen text.

## Install

```
pip install .
```

## Higher or lower

```python
import random
from dipgames.higher_lower import new_game, shuffled_numbers

rng = random.Random()
game = new_game(rng)              # HigherLowerGame with a random target
print(shuffled_numbers(rng))      # button layout order for 0..14
hint = game.guess(5)              # GuessValue.HIGHER / LOWER / EQUAL
print(game.sign_index(), game.mood(), game.is_over())
print(game.button_state(5))       # ButtonState for the button of 5
print(game.result())
```

`guess` raises `GuessError` in these cases:

- the game is already over,
- the number is outside 0..14,
- the number was already guessed.

## Tic-tac-toe

```python
import random
from dipgames.tictactoe_board import Square
from dipgames.tictactoe_play import Game, best_moves

rng = random.Random()
game = Game()
game.make_move(Square.B2)         # returns the new Status
game.computer_move(rng)           # returns the Square the computer took
print(game.board)
print(best_moves(game.board))
print(game.mood(), game.result())
```

`Board` is immutable. `Board.make_move` returns a new board, and raises
`ValueError` if the square is already taken. `Board.status()` returns a
`Status` with a `Progress` value (`IN_PROGRESS`, `DRAW`, `WIN`). For a win,
the `Status` also carries a `WinInfo` with the winning side and the line
mask. `Game.make_move` and `Game.computer_move` raise `GameOverError` once
the game has ended.

## Four in a row

```python
import random
from dipgames.four_in_row_board import Board, Side
from dipgames.four_in_row_play import (
    best_moves, choose_computer_move, game_result, player_mood,
)

board = Board().make_move(3)
print(best_moves(board))
board = board.make_move(choose_computer_move(board, random.Random()))
print(board)
print(player_mood(board, Side.RED), game_result(board, Side.RED))
```

`Board.make_move(column)` drops a disc for the side to move. It raises
`ValueError` if the column is out of range or full. `Board.possible_moves()`
lists the columns that are not full. `generate_lines(n)` and
`WINNING_LINES` give the masks of the lines the game checks.

## What this package does not do

There is no screen, sound or input handling, and no command to run. The
modules give you game state and decisions. Drawing the boards and reading
clicks is left to the program that uses them.

## Tests

```
pip install .[test]
pytest
```