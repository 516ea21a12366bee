"""Drawing the world and the snake with image textures."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .enums import Direction, FoodType
from .snake import Snake
from .window import Window
from .world import World

IMAGE_DIR = Path("img")
SNAKE_GRID = 20

log = logging.getLogger(__name__)

_COLOUR_NAMES = {
    FoodType.RED: "red",
    FoodType.GREEN: "green",
    FoodType.BLUE: "blue",
}

_DIRECTION_NAMES = {
    Direction.NORTH: "up",
    Direction.SOUTH: "down",
    Direction.EAST: "right",
    Direction.WEST: "left",
}

WORLD_IMAGES = ("background", "food_red", "food_green", "food_blue", "food_star")
SNAKE_IMAGES = tuple(
    f"head_{mouth}_{name}"
    for mouth in ("open", "close")
    for name in ("up", "down", "left", "right")
) + ("body_red", "body_green", "body_blue")


def food_image_key(food: FoodType) -> str | None:
    """Return the image name for food lying on the grid, None for an empty cell."""
    food = FoodType(food)
    if food is FoodType.STAR:
        return "food_star"
    colour = _COLOUR_NAMES.get(food)
    return f"food_{colour}" if colour else None


def head_image_key(direction: Direction, open_mouth: bool) -> str:
    """Return the image name for the head facing ``direction``."""
    mouth = "open" if open_mouth else "close"
    return f"head_{mouth}_{_DIRECTION_NAMES[Direction(direction)]}"


def body_image_key(food: FoodType) -> str | None:
    """Return the image name for a body ring, None for colours without one."""
    colour = _COLOUR_NAMES.get(FoodType(food))
    return f"body_{colour}" if colour else None


def _load_images(window: Window, names: tuple[str, ...]) -> dict[str, pygame.Surface | None]:
    images: dict[str, pygame.Surface | None] = {}
    for name in names:
        path = IMAGE_DIR / f"{name}.png"
        try:
            images[name] = window.load_image(path)
        except (OSError, pygame.error) as exc:
            log.warning("cannot load image %s: %s", path, exc)
            images[name] = None
    return images


class WorldView:
    """Textures for the grid background and the food items."""

    def __init__(self, window: Window) -> None:
        self.images = _load_images(window, WORLD_IMAGES)

    def close(self) -> None:
        """Drop the loaded textures."""
        self.images.clear()

    def draw(self, window: Window, world: World) -> None:
        """Draw every cell's background, then any food on it, shrunk and centred."""
        cell_width = window.width // world.width
        cell_height = window.height // world.height
        background = self.images.get("background")
        margin = cell_width // 4
        for y in range(world.height):
            for x in range(world.width):
                left, top = x * cell_width, y * cell_height
                window.draw_texture(background, left, top, cell_width, cell_height)
                key = food_image_key(world.get_food(x, y))
                if key is None:
                    continue
                window.draw_texture(
                    self.images.get(key),
                    left + margin,
                    top + margin,
                    cell_width - 2 * margin,
                    cell_height - 2 * margin,
                )


class SnakeView:
    """Textures for the snake's head and body rings."""

    def __init__(self, window: Window) -> None:
        self.images = _load_images(window, SNAKE_IMAGES)

    def draw(self, window: Window, snake: Snake) -> None:
        """Draw the head, a "MIAM !" label when eating, then the body rings."""
        cell_width = window.width // SNAKE_GRID
        cell_height = window.height // SNAKE_GRID

        if snake.open_mouth:
            window.set_foreground(255, 0, 0, 255)
            text_y = 0 if snake.y == 0 else (snake.y - 1) * cell_height
            window.draw_text("MIAM !", snake.x * cell_width, text_y, 20)

        margin = int(cell_width * 0.05)
        head = self.images.get(head_image_key(snake.direction, snake.open_mouth))
        window.draw_texture(
            head,
            snake.x * cell_width + margin,
            snake.y * cell_height + margin,
            cell_width - 2 * margin,
            cell_height - 2 * margin,
        )

        for ring in snake.rings:
            if ring.x == snake.x and ring.y == snake.y:
                continue
            key = body_image_key(ring.food)
            window.draw_texture(
                self.images.get(key) if key else None,
                ring.x * cell_width + margin,
                ring.y * cell_height + margin,
                cell_width - 2 * margin,
                cell_height - 2 * margin,
            )