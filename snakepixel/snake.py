"""The snake: its body, direction and background movement."""

from __future__ import annotations

import dataclasses
import logging
import threading

from .cell import Cell, CellType
from .grid import Grid

logger = logging.getLogger(__name__)

# Direction codes per axis: 0 stay, 1 positive, 2 negative.
_STEP = {0: 0, 1: 1, 2: -1}


def _offset(direction: int) -> int:
    return _STEP.get(direction, 0)


class Snake:
    """A snake living on a grid, moved by a background thread once started."""

    def __init__(self, map_size: int, grid: Grid, speed: float = 0.1) -> None:
        self._map_size = map_size
        self._grid = grid
        self._speed = speed
        self._dir_x = 2
        self._dir_y = 0
        self.lose = False
        self.food_counter = 0
        self._lock = threading.RLock()
        self._cond = threading.Condition()
        self._moving = False
        self._stopped = False
        self._thread: threading.Thread | None = None
        self._body = self._initial_body()

    def __enter__(self) -> Snake:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_thread()

    @property
    def body(self) -> list[Cell]:
        with self._lock:
            return list(self._body)

    @property
    def direction(self) -> tuple[int, int]:
        return self._dir_x, self._dir_y

    @property
    def moving(self) -> bool:
        with self._cond:
            return self._moving

    def _initial_body(self) -> list[Cell]:
        mid = self._map_size // 2
        return [Cell(mid + i, mid, CellType.SNAKE, True) for i in range(3)]

    def start(self) -> None:
        """Begin moving in a background thread, unless already moving or stopped."""
        with self._cond:
            if self._moving or self._stopped:
                return
            self._moving = True
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
            self._cond.notify_all()

    def pause(self) -> None:
        with self._cond:
            self._moving = False
            self._cond.notify_all()

    def resume(self) -> None:
        with self._cond:
            if not self._moving:
                self._moving = True
                self._cond.notify_all()

    def set_direction(self, dir_x: int, dir_y: int) -> None:
        """Change direction; ignored while the snake is not moving."""
        if not self.moving:
            return
        with self._lock:
            self._dir_x = dir_x
            self._dir_y = dir_y
        logger.info("Snake set direction to: %d, %d", dir_x, dir_y)

    def reset(self) -> None:
        """Stop the thread and restore the snake and its grid to the starting layout."""
        logger.info("Resetting snake...")
        self.lose = False
        self.stop_thread()
        with self._cond:
            self._stopped = False
        with self._lock:
            self._grid.food_flag = False
            self.food_counter = 0
            self._dir_x = 2
            self._dir_y = 0
            self._grid.set_up_cells()
            self._grid.set_up_borders()
            self._body = self._initial_body()

    def stop_thread(self) -> None:
        """Signal the movement thread to end and wait for it."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def stamp(self) -> None:
        """Write the body cells onto the grid."""
        with self._lock:
            for cell in self._body:
                self._grid.set_cell(cell.x, cell.y, cell)

    def step(self) -> bool:
        """Move one cell, then check for walls, self-collision and food; return the lose flag."""
        with self._lock:
            self._advance()
            self._check_next_cell()
            return self.lose

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._moving or self._stopped)
                if self._stopped:
                    return
                if self._cond.wait_for(lambda: self._stopped, timeout=self._speed):
                    return
            self.step()

    def _advance(self) -> None:
        dx, dy = _offset(self._dir_x), _offset(self._dir_y)
        head = self._body[0]
        new_head = dataclasses.replace(head, x=head.x + dx, y=head.y + dy)
        followers = [
            dataclasses.replace(cell, x=ahead.x, y=ahead.y)
            for ahead, cell in zip(self._body, self._body[1:])
        ]
        self._body = [new_head, *followers]
        logger.debug("Snake moved to: %d, %d", new_head.x, new_head.y)

    def _check_next_cell(self) -> None:
        head = self._body[0]
        under = self._grid.get_cell(head.x, head.y)
        next_x = head.x + _offset(self._dir_x)
        next_y = head.y + _offset(self._dir_y)

        if under.kind is CellType.BORDER:
            self.pause()
            self.lose = True
        if head.kind is CellType.SNAKE and any(
            cell.x == next_x and cell.y == next_y for cell in self._body[1:]
        ):
            self.pause()
            self.lose = True
            logger.info("Snake collided with itself at: (%d, %d)", next_x, next_y)
        if under.kind is CellType.FOOD:
            self._grid.food_flag = False
            self._grow()

    def _grow(self) -> None:
        last = self._body[-1]
        self._body.append(Cell(last.x, last.y, CellType.SNAKE, True))
        self.food_counter += 1
        logger.info("Snake grew to: %d", len(self._body))