import random

import pytest

from snakepixel.grid import Grid
from snakepixel.menu import GameState, Menu
from snakepixel.snake import Snake

MAP_SIZE = 50


@pytest.fixture
def snake():
    grid = Grid(MAP_SIZE, random.Random(3))
    grid.set_up_cells()
    grid.set_up_borders()
    s = Snake(MAP_SIZE, grid, speed=60.0)
    yield s
    s.stop_thread()


@pytest.fixture
def menu(snake):
    return Menu(snake)


def test_start_runs_snake(menu, snake):
    assert menu.state is GameState.NOT_STARTED
    menu.start()
    assert menu.state is GameState.RUNNING
    assert snake.moving is True


def test_pause_then_resume(menu, snake):
    menu.start()
    menu.pause()
    assert menu.state is GameState.PAUSED
    assert snake.moving is False
    menu.start()
    assert menu.state is GameState.RUNNING
    assert snake.moving is True


def test_start_while_running_changes_nothing(menu, snake):
    menu.start()
    menu.start()
    assert menu.state is GameState.RUNNING
    assert snake.moving is True


def test_no_loss_keeps_state(menu):
    menu.start()
    assert menu.check_lose_state() is False
    assert menu.state is GameState.RUNNING


def test_loss_requires_reset(menu, snake):
    menu.start()
    snake.lose = True
    assert menu.check_lose_state() is True
    assert menu.state is GameState.NEEDS_RESET
    menu.start()
    assert menu.state is GameState.NEEDS_RESET


def test_reset_returns_to_not_started(menu, snake):
    menu.start()
    snake.lose = True
    menu.check_lose_state()
    menu.pause()
    menu.reset()
    assert menu.state is GameState.NOT_STARTED
    assert snake.lose is False
    menu.start()
    assert menu.state is GameState.RUNNING
    assert snake.moving is True