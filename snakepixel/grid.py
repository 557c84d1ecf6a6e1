"""The two-dimensional map of cells."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from .cell import Cell, CellType

logger = logging.getLogger(__name__)


class Grid:
    """A square map of ``size + 1`` by ``size + 1`` cells indexed as ``[x][y]``."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < 2:
            raise ValueError(f"grid size must be at least 2, got {size}")
        self.size = size
        self.span = size + 1
        self.food_flag = False
        self._rng = rng if rng is not None else random.Random()
        self._cells = [[Cell() for _ in range(self.span)] for _ in range(self.span)]

    def __iter__(self) -> Iterator[Cell]:
        for column in self._cells:
            yield from column

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.span and 0 <= y < self.span):
            raise IndexError(f"cell ({x}, {y}) is outside a grid of span {self.span}")

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell stored at ``(x, y)``."""
        self._check(x, y)
        return self._cells[x][y]

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Store ``cell`` at ``(x, y)``."""
        self._check(x, y)
        self._cells[x][y] = cell

    def set_up_cells(self) -> None:
        """Make every cell empty and editable."""
        self._cells = [
            [Cell(x, y, CellType.EMPTY, True) for y in range(self.span)]
            for x in range(self.span)
        ]

    def set_up_borders(self) -> None:
        """Lay the fixed border cells around the playing field."""
        last = self.span - 1
        right = self.span - 2
        for i in range(self.span):
            self._cells[i][0] = Cell(i, 0, CellType.BORDER, False)
            self._cells[i][last] = Cell(i, right, CellType.BORDER, False)
            self._cells[0][i] = Cell(0, i, CellType.BORDER, False)
            self._cells[right][i] = Cell(right, i, CellType.BORDER, False)

    def clear_editable(self) -> None:
        """Reset every editable cell to empty, leaving borders and food alone."""
        for x, column in enumerate(self._cells):
            for y, cell in enumerate(column):
                if cell.editable:
                    column[y] = Cell(x, y, CellType.EMPTY, True)

    def place_food(self) -> Cell | None:
        """Drop one food cell if none is pending; return it, or None if food already exists."""
        if self.food_flag:
            return None
        high = self.span - 2
        while True:
            x = self._rng.randint(1, high)
            y = self._rng.randint(1, high)
            if self._cells[x][y].kind is not CellType.FOOD:
                break
        food = Cell(x, y, CellType.FOOD, False)
        self._cells[x][y] = food
        self.food_flag = True
        logger.info("Food set at: (%d, %d)", x, y)
        return food