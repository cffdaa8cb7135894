# micemen

A two-player puzzle game played in the terminal.

The board has 19 columns and 13 rows. Each column holds a random number of
walls, from 5 to 8. Red starts with 12 mice in the left nine columns and Blue
with 12 mice in the right nine. Every mouse is placed resting on a wall or on
another mouse.

On your turn you select a column that holds at least one of your mice and shift
it up or down by one cell. The column wraps around: the cell pushed off one end
comes back at the other, and the mice in the column move with it. The turn then
passes to the other player, and the selection jumps to the nearest column that
player can move. Red moves first.

## Installing

```
pip install .
```

## Playing

```
micemen
```

The command takes no options other than `-h` / `--help`. It needs a real
terminal for input; when standard input is not a terminal it prints
`Error: failed to initialize input: input is not a terminal` to standard error
and exits with status 1. The same game can be started with
`python -m micemen.engine`.

Controls:

| Key                             | Action                                           |
|---------------------------------|--------------------------------------------------|
| `←` / `→`, `A` / `D`, `h` / `l` | Select the previous / next column with your mice |
| `↑` / `↓`, `W` / `S`, `k` / `j` | Shift the selected column up / down              |
| `q`, `Q`, `Esc`, `Ctrl-C`       | Quit                                             |

The letter keys are there for terminals and multiplexers that do not pass the
arrow keys through. Column selection skips columns where the current player
has no mice and wraps from one end of the board to the other. Shifting a column
that holds none of your mice does nothing and keeps the turn with you.

Each frame shows whose turn it is, a marker row above the grid (`🔽` over the
selected column, `✓` over the other columns you can move), the grid itself,
each player's mouse count and movable columns (numbered from 1), and a reminder
of the controls.

## What the game does not do

The rules stop at shifting columns. Mice do not walk or fall on their own, no
mouse ever leaves the board, and no winner is decided: a game runs until a
player quits.

## Using the game from Python

The rules live in `micemen.game.MicemenGame`, independent of any display or
input. It takes an optional `random.Random` for a reproducible board.

```python
import random

from micemen.game import MicemenGame
from micemen.types import Action, PlayerColor

game = MicemenGame(rng=random.Random(7))
state = game.get_state()                         # an independent copy
print(state.current_player)                      # Red
print(game.valid_columns_for_player(PlayerColor.RED))

game.process_action(Action.MOVE_RIGHT)           # select the next valid column
game.process_action(Action.MOVE_COLUMN_UP)       # shift it; Blue to move
game.process_action(Action.QUIT)
assert game.is_game_over()
```

The other modules:

- `micemen.types` holds the board constants, `CellType`, `PlayerColor`,
  `Position`, `Mouse`, `Action`, `GameState` and `Player`, and the `Renderer`
  and `InputHandler` protocols.
- `micemen.render.TerminalRenderer` draws a state to a text stream
  (standard output by default) with ANSI escape codes.
- `micemen.keyboard.KeyboardHandler` reads keypresses through `blessed` in
  cbreak mode and can be used as a context manager; `key_to_action` maps a
  key's text and special-key name to an `Action`. Failures raise
  `micemen.keyboard.InputError`.
- `micemen.engine.GameEngine` runs the loop; it accepts any game, renderer and
  input handler, and `micemen.engine.main` is the command's entry point.

## Running the tests

```
pip install .[test]
pytest
```