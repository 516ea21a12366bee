"""Game rules and the interactive main loop."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass

import pygame

from .enums import Direction, FoodType, Status
from .save import save_game
from .snake import Snake
from .world import World

START_X = 5
START_Y = 5
START_DIRECTION = Direction.EAST
FOOD_POINTS = 1
STAR_POINTS = 5

WINDOW_SIZE = 800
WINDOW_TITLE = "Snaketris - Test Tête Snake"
GRID_SIZE = 20
STEP_MS = 250
GAMEOVER_DELAY_MS = 2000
DEFAULT_SAVE_FILE = "save.txt"

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.NORTH,
    pygame.K_DOWN: Direction.SOUTH,
    pygame.K_LEFT: Direction.WEST,
    pygame.K_RIGHT: Direction.EAST,
}


@dataclass(frozen=True)
class StepOutcome:
    """What happened during one game step."""

    eaten: FoodType = FoodType.NONE
    hit_self: bool = False
    hit_wall: bool = False
    triple_removed: bool = False


class Game:
    """A world with food and a snake that moves one cell per step."""

    def __init__(
        self, width: int = GRID_SIZE, height: int = GRID_SIZE, rng: random.Random | None = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.world = World(width, height)
        for _ in range(1 + self.rng.randrange(2)):
            self.world.add_random_food(self.rng)
        self.snake = Snake(START_X, START_Y, START_DIRECTION)
        self.status = Status.PLAY

    @property
    def gameover(self) -> bool:
        return self.status is Status.GAMEOVER

    @property
    def score(self) -> int:
        return self.snake.score

    def turn(self, direction: Direction) -> bool:
        """Ask the snake to turn; U-turns are refused and return False."""
        return self.snake.change_direction(direction)

    def step(self) -> StepOutcome:
        """Move the snake once, then apply collisions and eating."""
        if self.gameover:
            return StepOutcome()
        snake, world = self.snake, self.world
        snake.move(world)

        hit_self = snake.check_self_collision()
        hit_wall = not world.in_bounds(snake.x, snake.y)
        if hit_self or hit_wall:
            self.status = Status.GAMEOVER

        eaten = world.get_food(snake.x, snake.y)
        triple_removed = False
        if eaten is not FoodType.NONE:
            world.set_food(snake.x, snake.y, FoodType.NONE)
            if eaten is FoodType.STAR:
                snake.score += STAR_POINTS
            else:
                snake.score += FOOD_POINTS
                snake.add_ring(eaten)
            triple_removed = snake.check_triple_color()
            world.add_random_food(self.rng)

        return StepOutcome(eaten, hit_self, hit_wall, triple_removed)


def _report(outcome: StepOutcome) -> None:
    if outcome.hit_self:
        print("Auto-collision ! GAME OVER")
    if outcome.hit_wall:
        print("Le Snake a touché un mur ! GAME OVER")
    if outcome.eaten is FoodType.STAR:
        print("Nourriture étoile mangée → effet TETRIS activé !")
    if outcome.triple_removed:
        print("Triplet détecté : anneau du milieu supprimé.")


def _await_decision() -> bool:
    """Wait for O (continue) or N (quit); return True to continue."""
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_n:
                return False
            if event.key == pygame.K_o:
                return True


def main(argv: list[str] | None = None) -> int:
    """Run the game in a window; S saves to the file given on the command line."""
    from .view import SnakeView, WorldView
    from .window import Window

    parser = argparse.ArgumentParser(prog="snaketris")
    parser.add_argument("save_file", nargs="?", default=DEFAULT_SAVE_FILE)
    args = parser.parse_args(argv)

    window = Window(WINDOW_SIZE, WINDOW_SIZE, WINDOW_TITLE)
    try:
        snake_view = SnakeView(window)
        window.set_background(255, 255, 255, 255)
        window.set_foreground(0, 0, 0, 255)
        game = Game(GRID_SIZE, GRID_SIZE, random.Random())
        world_view = WorldView(window)
        clock = pygame.time.Clock()
        last_update = pygame.time.get_ticks()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    print(f"Touche pressée : {pygame.key.name(event.key)}")
                    if event.key == pygame.K_q:
                        running = False
                    elif event.key in _KEY_DIRECTIONS:
                        if not game.turn(_KEY_DIRECTIONS[event.key]):
                            print("Tentative de demi-tour ignorée.")
                    elif event.key == pygame.K_s:
                        try:
                            save_game(game.snake, game.world, args.save_file)
                        except OSError as exc:
                            print(f"Erreur ouverture fichier sauvegarde : {exc}", file=sys.stderr)
                        else:
                            print(f"Partie sauvegardée dans le fichier : {args.save_file}")
                        print("Appuyez sur O pour continuer ou N pour quitter.")
                        if not _await_decision():
                            running = False

            now = pygame.time.get_ticks()
            if not game.gameover and now - last_update > STEP_MS:
                _report(game.step())
                last_update = now

            window.clear()
            world_view.draw(window, game.world)
            snake_view.draw(window, game.snake)
            window.set_foreground(0, 0, 0, 255)
            window.draw_text(f"Score : {game.score}", 10, 10, 20)

            if game.gameover:
                window.set_foreground(255, 0, 0, 255)
                window.draw_text("GAME OVER", 200, 350, 80)
                window.refresh()
                pygame.time.delay(GAMEOVER_DELAY_MS)
                running = False
            else:
                window.refresh()
            clock.tick(60)

        world_view.close()
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())