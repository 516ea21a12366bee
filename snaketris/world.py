"""The playing field: a grid of cells that may hold food."""

from __future__ import annotations

import random
from collections.abc import Iterator

from .enums import FoodType

_COLOURS = (FoodType.RED, FoodType.GREEN, FoodType.BLUE)


class World:
    """A ``width`` x ``height`` grid of food cells."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("world dimensions must be positive")
        self.width = width
        self.height = height
        self._grid = [FoodType.NONE] * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_food(self, x: int, y: int) -> FoodType:
        """Return the food at (x, y); cells outside the grid are empty."""
        if not self.in_bounds(x, y):
            return FoodType.NONE
        return self._grid[y * self.width + x]

    def set_food(self, x: int, y: int, food: FoodType) -> None:
        """Put ``food`` at (x, y); positions outside the grid are ignored."""
        if self.in_bounds(x, y):
            self._grid[y * self.width + x] = FoodType(food)

    def food_cells(self) -> Iterator[tuple[int, int, FoodType]]:
        """Yield ``(x, y, food)`` for every non-empty cell, row by row."""
        for index, food in enumerate(self._grid):
            if food is not FoodType.NONE:
                y, x = divmod(index, self.width)
                yield x, y, food

    def add_random_food(
        self, rng: random.Random | None = None
    ) -> tuple[int, int, FoodType]:
        """Place a random food on a random empty cell and return it.

        One time in six the food is a star, otherwise a red, green or
        blue item chosen uniformly.
        """
        rng = rng if rng is not None else random.Random()
        if all(food is not FoodType.NONE for food in self._grid):
            raise ValueError("no empty cell left for food")
        while True:
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            if self.get_food(x, y) is FoodType.NONE:
                break
        if rng.randrange(6) == 0:
            food = FoodType.STAR
        else:
            food = _COLOURS[rng.randrange(3)]
        self.set_food(x, y, food)
        return x, y, food