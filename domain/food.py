"""
Food placement.
"""

import random
from typing import Optional

from .constants import Cell
from .errors import BoardFullError
from .grid import Grid
from .snake import SnakeBody


class FoodSpawner:
    """
    Picks a uniformly random cell not occupied by the snake.

    The random source is created once and reused for every spawn, so a
    fixed ``seed`` makes a whole session reproducible.
    """

    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng or random.Random(seed)

    def spawn(self, excluded: SnakeBody) -> Cell:
        """
        Return a random cell (x, y) not occupied by ``excluded``.
        We'll do a simple loop to find one.
        """
        if len(excluded) >= self.grid.capacity:
            raise BoardFullError("No free cell left for food.")
        while True:
            cell = Cell(
                self.rng.randrange(self.grid.cols),
                self.rng.randrange(self.grid.rows),
            )
            if not excluded.occupies(cell):
                return cell
