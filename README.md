# snaketris

A snake game with a twist. The snake eats red, green and blue food, and each
meal adds a ring of that colour to its body. Whenever three rings in a row share
a colour, the middle one is removed. Star food gives a bonus without adding a
ring.

## Installing

```
pip install .
```

## Playing

```
snaketris [SAVE_FILE]
```

The game runs on a 20×20 grid in an 800×800 window, and the snake moves one
cell every 250 ms. It starts at cell (5, 5) heading east, with one or two
pieces of food on the grid.

Images are loaded from `img/` and the font from `VeraMono.ttf`, both relative
to the directory you start the game in. A missing image is logged as a warning
and simply not drawn; a missing font is replaced by pygame's default font.

| Key          | Action                                          |
|--------------|-------------------------------------------------|
| Arrow keys   | Steer the snake (reversing direction is refused) |
| `s`          | Save the game, then `o` to go on or `n` to quit  |
| `q`          | Quit                                            |

Closing the window also quits. The game saves to `save.txt` unless you give
another path as the first argument.

## Scoring

- Coloured food: +1, and a ring of that colour is added.
- Star food: +5, and no ring is added.
- A run of three rings of one colour: the middle ring is removed, −1 (the score
  never drops below zero). Only the first such run, counted from the tail, is
  removed per meal.

Each meal puts a new piece of food on a random empty cell; one in six is a star.
The game ends when the snake runs into a wall or into its own body; "GAME OVER"
is shown for two seconds and the window closes.

## Save file format

A save file is plain text:

```
<head x> <head y> <direction>
R <x> <y> <food>      one line per ring, from the tail
F <x> <y> <food>      one line per food cell, row by row
```

Directions are numbered `0` north, `1` south, `2` east, `3` west; food is
`1` red, `2` green, `3` blue, `4` star.

## Using the game logic

The rules can be used without a window:

```python
import random

from snaketris.enums import Direction
from snaketris.game import Game

game = Game(20, 20, random.Random(0))
game.turn(Direction.SOUTH)
outcome = game.step()
print(outcome.eaten, game.score, game.gameover)
```

- `snaketris.world.World` is the food grid (`get_food`, `set_food`,
  `in_bounds`, `food_cells`, `add_random_food`).
- `snaketris.snake.Snake` holds the head, its `rings` from tail to head, and
  the `move`, `change_direction`, `add_ring`, `check_self_collision` and
  `check_triple_color` rules.
- `snaketris.save.format_save(snake, world)` returns the save-file text, and
  `snaketris.save.save_game(snake, world, path)` writes it to a file.

## What it does not do

The game can write a save file but cannot read one back: there is no way to
resume a saved game. There is no pause and no start screen.

## Running the tests

```
pip install .[test]
pytest
```