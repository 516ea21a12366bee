import random

import pytest

from snaketris.enums import Direction, FoodType, Status
from snaketris.game import START_X, START_Y, STAR_POINTS, Game
from snaketris.snake import Ring


def _clear(world):
    for x, y, _ in list(world.food_cells()):
        world.set_food(x, y, FoodType.NONE)


@pytest.fixture
def game():
    g = Game(20, 20, random.Random(1234))
    _clear(g.world)
    return g


@pytest.mark.parametrize("seed", range(10))
def test_new_game_has_one_or_two_foods(seed):
    g = Game(20, 20, random.Random(seed))
    assert len(list(g.world.food_cells())) in (1, 2)
    assert (g.snake.x, g.snake.y, g.snake.direction) == (START_X, START_Y, Direction.EAST)
    assert g.status is Status.PLAY


def test_step_moves_east(game):
    outcome = game.step()
    assert (game.snake.x, game.snake.y) == (START_X + 1, START_Y)
    assert outcome.eaten is FoodType.NONE
    assert not game.gameover


def test_u_turn_refused(game):
    assert game.turn(Direction.WEST) is False
    assert game.snake.direction is Direction.EAST
    assert game.turn(Direction.NORTH) is True
    assert game.snake.direction is Direction.NORTH


def test_wall_ends_game(game):
    game.turn(Direction.NORTH)
    for _ in range(game.snake.y):
        assert not game.step().hit_wall
    outcome = game.step()
    assert outcome.hit_wall
    assert game.status is Status.GAMEOVER


def test_no_movement_after_gameover(game):
    game.turn(Direction.NORTH)
    while not game.gameover:
        game.step()
    position = (game.snake.x, game.snake.y)
    assert game.step().hit_wall is False
    assert (game.snake.x, game.snake.y) == position


def test_eating_colour_adds_ring_and_new_food(game):
    game.world.set_food(START_X + 1, START_Y, FoodType.RED)
    outcome = game.step()
    assert outcome.eaten is FoodType.RED
    assert game.score == 1
    assert [r.food for r in game.snake.rings] == [FoodType.RED]
    assert game.world.get_food(START_X + 1, START_Y) is not FoodType.RED or (
        len(list(game.world.food_cells())) == 1
    )
    assert len(list(game.world.food_cells())) == 1


def test_eating_star_gives_bonus_without_ring(game):
    game.world.set_food(START_X + 1, START_Y, FoodType.STAR)
    outcome = game.step()
    assert outcome.eaten is FoodType.STAR
    assert game.score == STAR_POINTS
    assert game.snake.rings == []


def test_three_same_colours_remove_middle_ring(game):
    for offset in (1, 2, 3):
        game.world.set_food(START_X + offset, START_Y, FoodType.GREEN)
    outcomes = [game.step() for _ in range(3)]
    assert [o.triple_removed for o in outcomes] == [False, False, True]
    assert len(game.snake.rings) == 2
    assert game.score == 2


def test_self_collision_ends_game(game):
    game.snake.rings = [
        Ring(6, 4, FoodType.RED),
        Ring(6, 5, FoodType.GREEN),
        Ring(6, 6, FoodType.BLUE),
        Ring(5, 6, FoodType.RED),
        Ring(4, 6, FoodType.GREEN),
    ]
    outcome = game.step()
    assert outcome.hit_self
    assert not outcome.hit_wall
    assert game.gameover