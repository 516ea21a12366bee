"""The snake: a head and a chain of coloured body rings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import Direction, FoodType
from .world import World

_STEPS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


@dataclass
class Ring:
    """One body segment, coloured by the food that created it."""

    x: int
    y: int
    food: FoodType


@dataclass
class Snake:
    """The player's snake.

    ``rings`` runs from the tail (first) to the ring nearest the head (last).
    """

    x: int
    y: int
    direction: Direction
    rings: list[Ring] = field(default_factory=list)
    open_mouth: bool = False
    score: int = 0

    def __init__(self, x: int, y: int, direction: Direction) -> None:
        self.x = x
        self.y = y
        self.direction = Direction(direction)
        self.rings = []
        self.open_mouth = False
        self.score = 0

    def move(self, world: World) -> None:
        """Advance the head one cell; each ring takes its leader's place."""
        previous = (self.x, self.y)
        dx, dy = _STEPS[self.direction]
        self.x += dx
        self.y += dy
        self.open_mouth = world.get_food(self.x, self.y) is not FoodType.NONE
        for ring in reversed(self.rings):
            here = (ring.x, ring.y)
            ring.x, ring.y = previous
            previous = here

    def check_self_collision(self) -> bool:
        """Return True if the head shares a cell with a body ring."""
        return any(ring.x == self.x and ring.y == self.y for ring in self.rings)

    def change_direction(self, new_dir: Direction) -> bool:
        """Turn towards ``new_dir`` unless that is a U-turn.

        Returns True if the direction was changed.
        """
        new_dir = Direction(new_dir)
        if self.direction.is_opposite(new_dir):
            return False
        self.direction = new_dir
        return True

    def add_ring(self, food: FoodType) -> Ring:
        """Add a ring of colour ``food`` just behind the head."""
        ring = Ring(self.x, self.y, FoodType(food))
        self.rings.append(ring)
        return ring

    def check_triple_color(self) -> bool:
        """Remove the middle ring of the first run of three equal colours.

        Scanning starts at the tail. A removal costs one point, never
        taking the score below zero. Returns True if a ring was removed.
        """
        for index in range(len(self.rings) - 2):
            a, b, c = self.rings[index:index + 3]
            if a.food == b.food == c.food:
                del self.rings[index + 1]
                self.score = max(self.score - 1, 0)
                return True
        return False