import random

import pygame
import pytest

from snakepixel.cell import CellType
from snakepixel.grid import Grid
from snakepixel.menu import GameState, Menu
from snakepixel.snake import Snake
from snakepixel.window import Window, main

SIZE = 10


@pytest.fixture
def game():
    grid = Grid(SIZE, random.Random(7))
    snake = Snake(SIZE, grid, speed=60.0)
    menu = Menu(snake)
    window = Window(SIZE, snake, menu, grid)
    yield window, snake, menu, grid
    snake.stop_thread()


def test_constructor_lays_out_borders(game):
    _, _, _, grid = game
    assert grid.get_cell(0, 0).kind is CellType.BORDER
    assert grid.get_cell(SIZE // 2, 0).kind is CellType.BORDER
    centre = grid.get_cell(3, 3)
    assert centre.kind is CellType.EMPTY
    assert centre.editable is True


def test_update_builds_boxes_for_each_type(game):
    window, _, _, grid = game
    boxes = window.update()
    assert len(boxes[CellType.FOOD]) == 6
    assert len(boxes[CellType.SNAKE]) in (12, 18)
    borders = sum(1 for cell in grid if cell.kind is CellType.BORDER)
    assert len(boxes[CellType.BORDER]) == borders * 6
    assert window.boxes == boxes


def test_update_places_food_once(game):
    window, _, _, grid = game
    window.update()
    window.update()
    assert sum(1 for cell in grid if cell.kind is CellType.FOOD) == 1


def test_enter_starts_game(game):
    window, snake, menu, _ = game
    assert window.handle_key(pygame.K_RETURN) is True
    assert menu.state is GameState.RUNNING
    assert snake.moving is True


def test_direction_keys_change_direction_while_running(game):
    window, snake, _, _ = game
    window.handle_key(pygame.K_RETURN)
    window.handle_key(pygame.K_d)
    assert snake.direction == (1, 0)
    window.handle_key(pygame.K_UP)
    assert snake.direction == (0, 2)
    window.handle_key(pygame.K_s)
    assert snake.direction == (0, 1)
    window.handle_key(pygame.K_LEFT)
    assert snake.direction == (2, 0)


def test_direction_ignored_before_start(game):
    window, snake, _, _ = game
    window.handle_key(pygame.K_DOWN)
    assert snake.direction == (2, 0)


def test_space_pauses(game):
    window, snake, menu, _ = game
    window.handle_key(pygame.K_RETURN)
    window.handle_key(pygame.K_SPACE)
    assert menu.state is GameState.PAUSED
    assert snake.moving is False


def test_r_resets_game(game):
    window, snake, menu, _ = game
    window.handle_key(pygame.K_RETURN)
    window.handle_key(pygame.K_d)
    window.handle_key(pygame.K_r)
    assert menu.state is GameState.NOT_STARTED
    assert snake.direction == (2, 0)
    assert snake.food_counter == 0


def test_escape_pauses_and_terminates(game):
    window, _, menu, _ = game
    window.handle_key(pygame.K_ESCAPE)
    assert menu.state is GameState.PAUSED
    assert window.running is False


def test_unbound_key_is_ignored(game):
    window, _, menu, _ = game
    assert window.handle_key(pygame.K_q) is False
    assert menu.state is GameState.NOT_STARTED


def test_main_rejects_bad_size_argument():
    with pytest.raises(SystemExit):
        main(["--size", "abc"])


def test_main_rejects_too_small_grid():
    with pytest.raises(ValueError):
        main(["--size", "1"])