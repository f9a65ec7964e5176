"""
Snake body entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, List

from .constants import Cell
from .errors import EmptyBodyError


class SnakeBody:
    """
    Ordered cells occupied by the snake.

    Attributes:
        positions: deque of Cell from head at index 0 to tail at the end
        capacity: upper bound on length (the number of cells on the board)
    """

    def __init__(self, positions: Iterable[Cell], capacity: int):
        cells = [Cell(*p) for p in positions]
        if len(cells) > capacity:
            raise ValueError(f"Snake of length {len(cells)} exceeds capacity {capacity}.")
        self.positions = deque(cells)
        self.capacity = capacity

    def head(self) -> Cell:
        """Return the head position (first element)."""
        if not self.positions:
            raise EmptyBodyError("Snake body is empty.")
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        if not self.positions:
            raise EmptyBodyError("Snake body is empty.")
        return self.positions[-1]

    def occupies(self, cell: Cell) -> bool:
        return cell in self.positions

    def advance(self, new_head: Cell, grow: bool = False) -> None:
        """
        Prepend ``new_head``; drop the tail unless ``grow`` is set.

        Adjacency of ``new_head`` is not checked here.
        """
        if grow and len(self.positions) >= self.capacity:
            raise ValueError(f"Snake cannot grow beyond capacity {self.capacity}.")
        self.positions.appendleft(Cell(*new_head))
        if not grow:
            self.positions.pop()

    def cells(self) -> List[Cell]:
        return list(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.positions)

    def __repr__(self):
        return f"<SnakeBody len={len(self.positions)} head={self.positions[0] if self.positions else None}>"
