"""Vertex geometry for the grid lines and the filled cell boxes.

Coordinates are normalised device coordinates: both axes run from -1 to 1,
with y pointing up.
"""

from __future__ import annotations

from collections.abc import Iterable

from .cell import Cell, CellType

Vertex = tuple[float, float, float]


def grid_vertices(grid_size: int) -> list[Vertex]:
    """Return line end points for ``grid_size`` vertical and horizontal lines.

    Each line index contributes four vertices: a vertical line followed by a
    horizontal one, both spanning the whole viewport.
    """
    if grid_size < 2:
        raise ValueError(f"grid needs at least 2 lines, got {grid_size}")
    vertices: list[Vertex] = []
    for i in range(grid_size):
        coord = (i / (grid_size - 1)) * 2.0 - 1.0
        vertices.extend(
            [
                (coord, -1.0, 0.0),
                (coord, 1.0, 0.0),
                (-1.0, coord, 0.0),
                (1.0, coord, 0.0),
            ]
        )
    return vertices


def box_vertices(cell_size: float, offset_x: float, offset_y: float) -> list[Vertex]:
    """Return two triangles covering a square of side ``cell_size``.

    The square is centred on ``(offset_x, -offset_y)``: a growing y offset
    moves the box down the screen.
    """
    half = cell_size / 2
    left, right = -half + offset_x, half + offset_x
    bottom, top = -half - offset_y, half - offset_y
    return [
        (left, bottom, 0.0),
        (right, bottom, 0.0),
        (right, top, 0.0),
        (right, top, 0.0),
        (left, top, 0.0),
        (left, bottom, 0.0),
    ]


def cell_boxes(grid: Iterable[Cell], cell_size: float, cell_type: CellType) -> list[Vertex]:
    """Return the triangles for every cell of ``cell_type`` on ``grid``."""
    wanted = CellType(cell_type)
    vertices: list[Vertex] = []
    start = -1.0 + cell_size / 2.0
    for cell in grid:
        if cell.kind is wanted:
            vertices.extend(
                box_vertices(cell_size, start + cell.x * cell_size, start + cell.y * cell_size)
            )
    return vertices