"""
Game constants for the snake simulation.
"""

from enum import Enum
from typing import NamedTuple, Tuple


class Direction(Enum):
    """Movement directions as unit (dx, dy) deltas; y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Cell(NamedTuple):
    """An (x, y) grid coordinate."""

    x: int
    y: int

    def shifted(self, direction: Direction) -> "Cell":
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)


# Board settings
GRID_COLS = 32
GRID_ROWS = 20

# Snake settings
INITIAL_LENGTH = 4
INITIAL_DIRECTION = Direction.RIGHT

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"
