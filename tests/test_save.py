import pytest

from snaketris.enums import Direction, FoodType
from snaketris.save import format_save, save_game
from snaketris.snake import Snake
from snaketris.world import World


def test_header_only():
    assert format_save(Snake(5, 5, Direction.EAST), World(20, 20)) == "5 5 2\n"


def test_rings_and_food():
    snake = Snake(5, 5, Direction.EAST)
    snake.add_ring(FoodType.RED)
    world = World(20, 20)
    world.set_food(3, 4, FoodType.STAR)
    lines = format_save(snake, world).splitlines()
    assert lines == ["5 5 2", "R 5 5 1", "F 3 4 4"]


def test_food_lines_in_row_order():
    world = World(5, 5)
    world.set_food(4, 0, FoodType.GREEN)
    world.set_food(0, 3, FoodType.BLUE)
    world.set_food(2, 1, FoodType.RED)
    lines = format_save(Snake(0, 0, Direction.NORTH), world).splitlines()[1:]
    coords = [tuple(int(v) for v in line.split()[1:3]) for line in lines]
    assert coords == sorted(coords, key=lambda c: (c[1], c[0]))
    assert all(line.startswith("F ") for line in lines)


def test_ring_lines_follow_tail_order():
    snake = Snake(2, 2, Direction.SOUTH)
    for food in (FoodType.BLUE, FoodType.GREEN):
        snake.add_ring(food)
        snake.move(World(10, 10))
    lines = format_save(snake, World(10, 10)).splitlines()
    ring_foods = [int(line.split()[3]) for line in lines if line.startswith("R ")]
    assert ring_foods == [int(FoodType.BLUE), int(FoodType.GREEN)]


def test_save_game_writes_file(tmp_path):
    snake = Snake(7, 1, Direction.WEST)
    snake.add_ring(FoodType.GREEN)
    world = World(10, 10)
    world.set_food(9, 9, FoodType.RED)
    path = tmp_path / "save.txt"
    save_game(snake, world, path)
    assert path.read_text(encoding="utf-8") == format_save(snake, world)


def test_save_game_overwrites(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("old content\n", encoding="utf-8")
    save_game(Snake(1, 2, Direction.NORTH), World(3, 3), path)
    assert path.read_text(encoding="utf-8") == "1 2 0\n"


def test_save_game_bad_path(tmp_path):
    with pytest.raises(OSError):
        save_game(Snake(0, 0, Direction.EAST), World(2, 2), tmp_path / "missing" / "s.txt")