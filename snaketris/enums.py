"""Core enumerations: snake directions, food kinds and game status."""

from __future__ import annotations

from enum import Enum, IntEnum


class Direction(IntEnum):
    """Direction in which the snake's head travels."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    def is_opposite(self, other: Direction) -> bool:
        """Return True if ``other`` points the opposite way."""
        return _OPPOSITES[self] is other


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class FoodType(IntEnum):
    """Content of a world cell, and colour of a body ring."""

    NONE = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    STAR = 4


class Status(Enum):
    """Overall state of a game."""

    BEGIN = 0
    PLAY = 1
    PAUSE = 2
    GAMEOVER = 3