# solitaire

Klondike solitaire for the terminal. Cards are drawn as ASCII art with
Unicode suit symbols. The screen is redrawn with ANSI escape codes after
each move, so any ANSI-capable terminal will work.

## Installing

```
pip install .
```

## Playing

```
klondike
```

To shuffle the same way every time, pass a seed:

```
klondike --seed 42
```

First choose a draw-three game (`3`) or a draw-one game (`1`). Then type
`start`. On each turn, enter one of these commands:

| Command        | Effect                                              |
|----------------|-----------------------------------------------------|
| `draw` / `d`   | Draw cards from the deck onto the free pile. An empty deck is refilled from the free pile. |
| `auto` / `a`   | Keep moving the top free card and the top board cards to the foundation stacks until none can go. |
| `move` / `m`   | Move cards. You are then asked for the source and the target. |
| `stop` / `s`   | Discard the command typed so far.                   |
| `exit` / `e`   | Give up and end the game.                           |

After `move`, you name a source and then a target:

- `free` (or `f`): the top drawn card. Its target is `stack` or a pile number.
- `stack`: you also give a suit (`spade`, `heart`, `club` or `diamond`).
  The top card of that stack goes onto a pile number.
- a board pile number from `1` to `7`. Its target is `stack` or another
  pile number. When the target is a pile, you are also asked how many
  cards to move.

Runs must descend in rank and alternate in colour. Only a king may go on
an empty pile. An illegal move shows a message and the game carries on.

You win once all four foundation stacks hold thirteen cards each. If
input runs out, the command exits with status 1.

## Using the library

```python
import random

from solitaire.klondike import Klondike
from solitaire.tableau import Action, Command, IllegalMoveError

game = Klondike(draw_one=True, rng=random.Random(7))
game.deal()
game.apply(Command(Action.DRAW))
try:
    game.apply(Command(Action.MOVE, source="free", target="stack"))
except IllegalMoveError as error:
    print(error)
print(game.render())
```

These are the modules:

- `solitaire.klondike`: the `Klondike` game and its moves
  (`move_board_to_board`, `move_free_to_board`, `move_free_to_stack`,
  `move_board_to_stack`, `move_stack_to_board`, `draw_cards`).
- `solitaire.tableau`: the shared `Solitaire` table, `Command`, `Action`,
  `IllegalMoveError` and the `render()` method that draws the screen.
- `solitaire.cards`: `Card` and `Deck`.
- `solitaire.graphics`: the card pictures and `card_graphic(suit, rank)`.
- `solitaire.ansi`: `clear_screen()` and `goto(row, col)`.
- `solitaire.set_once`: `SetOnce`, a holder whose value can be set only once.

`solitaire.cli.play(game, ask, out)` runs a full game loop and returns
whether the player won. You supply `ask`, which returns one answer for a
given prompt, and `out`, which receives the text to display. This lets a
script or a test drive a game. `solitaire.cli.prompt_command(game, ask)`
reads a single `Command`.

## What it does not do

Klondike is the only game. There is no undo, no saving or loading of a
game, and no scoring or timer.

## Running the tests

```
pip install .[test]
pytest
```