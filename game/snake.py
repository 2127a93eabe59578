from enum import Enum
from typing import NamedTuple, Tuple

from config import START_CELL


class Cell(NamedTuple):
    """A grid coordinate: column ``x`` and row ``y`` (row 0 is the top)."""
    x: int
    y: int


class Direction(Enum):
    """Movement directions as unit vectors in screen coordinates."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        """Return the direction pointing the other way."""
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, cell):
        """Return the cell one step from ``cell`` in this direction."""
        dx, dy = self.value
        return Cell(cell[0] + dx, cell[1] + dy)


Body = Tuple[Cell, ...]


def initial_snake(width, height):
    """Single-segment snake at the start cell, pulled inside small grids."""
    x = min(START_CELL[0], width // 2)
    y = min(START_CELL[1], height // 2)
    return (Cell(x, y),)


def request_direction(current, requested):
    """Adopt ``requested`` unless it would reverse straight into the neck."""
    if requested is current.opposite:
        return current
    return requested


def check_wall_collision(cell, width, height):
    """Check if a cell lies outside the [0, width) x [0, height) board."""
    x, y = cell
    return x < 0 or x >= width or y < 0 or y >= height


def check_self_collision(cell, body):
    """Check if a cell lands on any segment of the current body.

    The tail counts: it has not moved yet when the new head is tested.
    """
    return cell in body


def move(body, new_head, grow):
    """Prepend ``new_head``; keep the tail only when growing."""
    if grow:
        return (new_head,) + tuple(body)
    return (new_head,) + tuple(body[:-1])


def fits(cells, width, height):
    """Check that every cell is inside a board of the given size."""
    return all(not check_wall_collision(c, width, height) for c in cells)
