"""
Domain entities for the snake game engine.

This module contains the simulation core, independent of rendering and
input handling (pygame, windows, keyboards).
"""

from .constants import (
    Cell,
    Direction,
    GRID_COLS,
    GRID_ROWS,
    INITIAL_LENGTH,
    INITIAL_DIRECTION,
)
from .errors import SnakeError, EmptyBodyError, BoardFullError
from .grid import Grid
from .snake import SnakeBody
from .food import FoodSpawner
from .collision import hits_wall, hits_self
from .game_state import GameSnapshot, GameStatus
from .simulation import GameSimulation

__all__ = [
    'Cell', 'Direction',
    'GRID_COLS', 'GRID_ROWS', 'INITIAL_LENGTH', 'INITIAL_DIRECTION',
    'SnakeError', 'EmptyBodyError', 'BoardFullError',
    'Grid',
    'SnakeBody',
    'FoodSpawner',
    'hits_wall', 'hits_self',
    'GameSnapshot', 'GameStatus',
    'GameSimulation',
]
