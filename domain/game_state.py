"""
GameSnapshot entity - a read-only view of the game at a point in time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import Cell, Direction


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """
    Everything a renderer needs to draw one frame.

    Attributes:
        snake: cells from head (index 0) to tail
        food: the food cell, or None when the board is full
        score: apples eaten since the last (re)start
        status: RUNNING or GAME_OVER
        direction: current movement direction
        cols, rows: board dimensions
        death_reason: 'wall', 'self' or 'board_full' once the game is over
        tick: number of moves committed since the last (re)start
    """

    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    status: GameStatus
    direction: Direction
    cols: int
    rows: int
    death_reason: Optional[str] = None
    tick: int = 0

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        H = snake head
        T = snake body/tail
        (0,0) is the top left, matching screen coordinates.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            # A head that left the board is not drawn
            if not (0 <= x < self.cols and 0 <= y < self.rows):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.cols)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameSnapshot tick={self.tick}, status={self.status.value}, "
            f"food={self.food}, length={len(self.snake)}, score={self.score}>"
        )
