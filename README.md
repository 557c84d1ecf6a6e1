# snakepixel

A classic snake game played on a square pixel grid, drawn with pygame in an
800 × 800 window. The playing field is framed by a red border; the snake is
drawn in green and the food in blue. Eat food to grow, and avoid the walls and
your own tail.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game window with:

```
snakepixel
```

The grid has 50 cells per side by default; choose another size with
`--size`:

```
snakepixel --size 30
```

### Controls

| Key                 | Action                                 |
|---------------------|----------------------------------------|
| Enter               | Start the game, or resume after pause  |
| Space               | Pause                                  |
| W / Up arrow        | Move up                                |
| S / Down arrow      | Move down                              |
| A / Left arrow      | Move left                              |
| D / Right arrow     | Move right                             |
| R                   | Pause and reset the game               |
| Escape              | Pause and close the window             |

The snake moves one cell every 0.1 seconds in a background thread and only
changes direction while it is moving. When it runs into a wall or into itself
the game ends and the score (the number of food items eaten) is logged;
press R to start over. Progress messages are written through the standard
`logging` module.

## Using the game logic directly

The game logic lives in plain Python classes and works without a window:

```python
import random

from snakepixel.grid import Grid
from snakepixel.snake import Snake
from snakepixel.menu import Menu

grid = Grid(50, random.Random(1))
grid.set_up_cells()
grid.set_up_borders()

snake = Snake(50, grid)   # speed defaults to 0.1 seconds per step
menu = Menu(snake)

snake.stamp()             # write the body onto the grid
grid.place_food()         # returns the new food Cell, or None if food exists
lost = snake.step()       # advance one cell; returns the lose flag
menu.check_lose_state()
```

- `snakepixel.cell` holds `Cell`, a frozen dataclass with `x`, `y`, `kind`
  and `editable`, and `CellType` (`EMPTY`, `BORDER`, `SNAKE`, `FOOD`).
- `Grid` stores `size + 1` by `size + 1` cells; `size` must be at least 2.
  Iterating over a grid yields every cell.
- `Snake.start()` launches the movement thread; `pause()`, `resume()`,
  `reset()` and `stop_thread()` control it. A snake is also a context manager
  that stops its thread on exit.
- `Menu` tracks a `GameState` (`NOT_STARTED`, `PAUSED`, `RUNNING`,
  `NEEDS_RESET`) and drives the snake through `start()`, `pause()`,
  `check_lose_state()` and `reset()`.
- `snakepixel.geometry` turns a grid into vertex lists (`grid_vertices`,
  `box_vertices`, `cell_boxes`) in normalised device coordinates, which the
  window uses for drawing.

## What it does not do

Scores are not kept between games or saved anywhere, and there is no
on-screen score or menu: game state is reported only through log messages.