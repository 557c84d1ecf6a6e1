"""Game state machine driving the snake."""

from __future__ import annotations

import logging
from enum import IntEnum

from .snake import Snake

logger = logging.getLogger(__name__)


class GameState(IntEnum):
    """Where the game stands."""

    NOT_STARTED = 0
    PAUSED = 1
    RUNNING = 2
    NEEDS_RESET = 3


class Menu:
    """Starts, pauses and resets the game in response to player commands."""

    def __init__(self, snake: Snake) -> None:
        self._snake = snake
        self.state = GameState.NOT_STARTED

    def start(self) -> None:
        """Start a new game or resume a paused one."""
        if self.state is GameState.NOT_STARTED:
            logger.info("Starting game...")
            self.state = GameState.RUNNING
            self._snake.start()
        elif self.state is GameState.PAUSED:
            logger.info("Restarting game...")
            self.state = GameState.RUNNING
            self._snake.resume()

    def pause(self) -> None:
        logger.info("Pausing game...")
        self.state = GameState.PAUSED
        self._snake.pause()

    def check_lose_state(self) -> bool:
        """Return True, and require a reset, once the snake has lost."""
        if self._snake.lose:
            logger.info("Game Over, score is: %d", self._snake.food_counter)
            self.state = GameState.NEEDS_RESET
            return True
        return False

    def reset(self) -> None:
        logger.info("Resetting game...")
        self.state = GameState.NOT_STARTED
        self._snake.reset()