"""The game window: draws the grid and routes keyboard input."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .cell import CellType  # noqa: E402
from .geometry import Vertex, cell_boxes, grid_vertices  # noqa: E402
from .grid import Grid  # noqa: E402
from .menu import Menu  # noqa: E402
from .snake import Snake  # noqa: E402

logger = logging.getLogger(__name__)

_BACKGROUND = (0, 0, 0)
_LINE_COLOUR = (255, 255, 255)
_BOX_COLOURS = {
    CellType.BORDER: (255, 0, 0),
    CellType.SNAKE: (0, 255, 0),
    CellType.FOOD: (0, 0, 255),
}


class Window:
    """An 800 by 800 window showing the map and driving the menu and snake."""

    width = 800
    height = 800
    title = "actual screen"
    frame_rate = 60

    def __init__(self, grid_size: int, snake: Snake, menu: Menu, grid: Grid) -> None:
        self._grid_size = grid_size + 1
        self._cell_size = 2.0 / grid_size
        self._snake = snake
        self._menu = menu
        self._grid = grid
        self.running = True
        self.boxes: dict[CellType, list[Vertex]] = {kind: [] for kind in _BOX_COLOURS}
        self._keys: dict[int, tuple[str, Callable[[], None]]] = {
            pygame.K_RETURN: ("Enter", self._menu.start),
            pygame.K_ESCAPE: ("Escape", self._quit),
            pygame.K_SPACE: ("Space", self._menu.pause),
            pygame.K_w: ("W", lambda: self._snake.set_direction(0, 2)),
            pygame.K_s: ("S", lambda: self._snake.set_direction(0, 1)),
            pygame.K_a: ("A", lambda: self._snake.set_direction(2, 0)),
            pygame.K_d: ("D", lambda: self._snake.set_direction(1, 0)),
            pygame.K_UP: ("up", lambda: self._snake.set_direction(0, 2)),
            pygame.K_DOWN: ("down", lambda: self._snake.set_direction(0, 1)),
            pygame.K_LEFT: ("left", lambda: self._snake.set_direction(2, 0)),
            pygame.K_RIGHT: ("right", lambda: self._snake.set_direction(1, 0)),
            pygame.K_r: ("R", self._restart),
        }
        self._grid.set_up_cells()
        self._grid.set_up_borders()

    def load(self) -> None:
        """Open the window and run the draw loop until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.width, self.height))
        except pygame.error as exc:
            logger.error("could not create window: %s", exc)
            self.terminate()
            raise RuntimeError("could not create window") from exc
        pygame.display.set_caption(self.title)
        clock = pygame.time.Clock()
        lines = grid_vertices(self._grid_size)
        self.running = True

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._on_close()
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
                if not self.running:
                    break
            if not self.running:
                break
            self.update()
            self._draw(surface, lines)
            pygame.display.flip()
            clock.tick(self.frame_rate)

    def terminate(self) -> None:
        """Close the window and shut the display down."""
        logger.info("Closing window...")
        self.running = False
        logger.info("Terminating...")
        pygame.quit()

    def update(self) -> dict[CellType, list[Vertex]]:
        """Refresh the map from the game state and rebuild the box triangles."""
        self._grid.clear_editable()
        self._snake.stamp()
        self._menu.check_lose_state()
        self._grid.place_food()
        self.boxes = {
            kind: cell_boxes(self._grid, self._cell_size, kind) for kind in _BOX_COLOURS
        }
        return self.boxes

    def handle_key(self, key: int) -> bool:
        """React to a key press; return whether the key is bound."""
        binding = self._keys.get(key)
        if binding is None:
            return False
        name, action = binding
        logger.info("%s key pressed", name)
        action()
        return True

    def _quit(self) -> None:
        self._menu.pause()
        self.terminate()

    def _restart(self) -> None:
        self._menu.pause()
        self._menu.reset()

    def _on_close(self) -> None:
        logger.info("Window close button clicked")
        self._quit()

    def _to_screen(self, vertex: Vertex) -> tuple[float, float]:
        x, y, _ = vertex
        return (x + 1.0) / 2.0 * self.width, (1.0 - y) / 2.0 * self.height

    def _draw(self, surface: pygame.Surface, lines: Sequence[Vertex]) -> None:
        surface.fill(_BACKGROUND)
        points = [self._to_screen(v) for v in lines]
        for start, end in zip(points[::2], points[1::2]):
            pygame.draw.line(surface, _LINE_COLOUR, start, end)
        for kind, colour in _BOX_COLOURS.items():
            corners = [self._to_screen(v) for v in self.boxes.get(kind, [])]
            for a, b, c in zip(corners[::3], corners[1::3], corners[2::3]):
                pygame.draw.polygon(surface, colour, (a, b, c))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game."""
    parser = argparse.ArgumentParser(prog="snakepixel", description="Play snake on a pixel grid.")
    parser.add_argument("--size", type=int, default=50, help="cells per side (default 50)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    grid = Grid(args.size)
    with Snake(args.size, grid) as snake:
        menu = Menu(snake)
        window = Window(args.size, snake, menu, grid)
        try:
            window.load()
        except RuntimeError:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())