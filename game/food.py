import random

from game.snake import Cell


class BoardFullError(Exception):
    """Raised when every cell of the board is covered by the snake."""


def spawn(width, height, rng=None):
    """Pick a uniformly random cell on the board."""
    rng = rng or random
    return Cell(rng.randrange(width), rng.randrange(height))


def place_food(snake_cells, width, height, rng=None):
    """Place food on a random cell not occupied by the snake.

    Rejection sampling: draw cells until one misses the snake. There is no cap
    on attempts, so a board with no free cell is refused up front.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
    occupied = set(snake_cells)
    if len(occupied) >= width * height:
        raise BoardFullError(f"No free cell left on a {width}x{height} board")

    while True:
        candidate = spawn(width, height, rng)
        if candidate not in occupied:
            return candidate
