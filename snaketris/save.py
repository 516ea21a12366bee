"""Writing a game state to a plain-text save file."""

from __future__ import annotations

import os

from .snake import Snake
from .world import World


def format_save(snake: Snake, world: World) -> str:
    """Return the save-file text for ``snake`` and ``world``.

    The first line holds the head position and direction, then one
    ``R x y food`` line per ring from the tail, then one ``F x y food``
    line per food cell in row order.
    """
    lines = [f"{snake.x} {snake.y} {int(snake.direction)}"]
    lines.extend(f"R {r.x} {r.y} {int(r.food)}" for r in snake.rings)
    lines.extend(f"F {x} {y} {int(food)}" for x, y, food in world.food_cells())
    return "".join(line + "\n" for line in lines)


def save_game(snake: Snake, world: World, path: str | os.PathLike[str]) -> None:
    """Write the game state to ``path``; raises OSError if it cannot."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_save(snake, world))