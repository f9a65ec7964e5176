"""
Collision rules. Pure functions over the current state; nothing is mutated.
"""

from .constants import Cell
from .grid import Grid
from .snake import SnakeBody


def hits_wall(grid: Grid, cell: Cell) -> bool:
    return not grid.is_in_bounds(cell)


def hits_self(body: SnakeBody, cell: Cell, growing: bool = False) -> bool:
    """
    True if moving the head into ``cell`` runs into the body.

    Checked against the body before the move is applied. The current tail
    vacates this tick unless the snake is growing, so stepping onto it is
    only a collision on a growth move.
    """
    if not body.occupies(cell):
        return False
    if not growing and cell == body.tail:
        return False
    return True
