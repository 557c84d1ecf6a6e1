"""Cells of the playing grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CellType(IntEnum):
    """What occupies a grid cell."""

    EMPTY = 0
    BORDER = 1
    SNAKE = 2
    FOOD = 3


@dataclass(frozen=True)
class Cell:
    """A single box on the grid: its coordinates, contents and whether it may be cleared."""

    x: int = 0
    y: int = 0
    kind: CellType = CellType.EMPTY
    editable: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", CellType(self.kind))