"""
Exceptions raised by the simulation core.
"""


class SnakeError(Exception):
    """Base class for simulation errors."""


class EmptyBodyError(SnakeError):
    """The snake body holds no cells; an internal invariant was broken."""


class BoardFullError(SnakeError):
    """Every grid cell is occupied, so there is nowhere to place food."""
