"""
GameSimulation - the tick state machine for a single-player snake game.
"""

import logging
from typing import Optional

from .collision import hits_self, hits_wall
from .constants import (
    Cell,
    DEATH_BOARD_FULL,
    DEATH_SELF,
    DEATH_WALL,
    Direction,
    INITIAL_DIRECTION,
    INITIAL_LENGTH,
)
from .errors import BoardFullError
from .food import FoodSpawner
from .game_state import GameSnapshot, GameStatus
from .grid import Grid
from .snake import SnakeBody

logger = logging.getLogger(__name__)


class GameSimulation:
    """
    Owns the snake, the food, the score, the direction and the game status.

    Created once per program run; ``restart()`` reinitialises it in place.
    Direction and restart requests that are not allowed in the current
    state are ignored rather than reported.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        spawner: Optional[FoodSpawner] = None,
        initial_length: int = INITIAL_LENGTH,
    ):
        self.grid = grid or Grid()
        self.spawner = spawner or FoodSpawner(self.grid)
        if initial_length < 1 or initial_length > self.grid.cols // 2 + 1:
            raise ValueError(
                f"Initial length {initial_length} does not fit a {self.grid.cols}-column grid."
            )
        self.initial_length = initial_length

        self.body: SnakeBody
        self.direction: Direction
        self.food: Optional[Cell]
        self.score: int
        self.status: GameStatus
        self.death_reason: Optional[str]
        self.tick: int
        self._reset()

    def _reset(self) -> None:
        cx, cy = self.grid.center
        self.body = SnakeBody(
            [Cell(cx - i, cy) for i in range(self.initial_length)],
            capacity=self.grid.capacity,
        )
        self.direction = INITIAL_DIRECTION
        self.food = self.spawner.spawn(self.body)
        self.score = 0
        self.status = GameStatus.RUNNING
        self.death_reason = None
        self.tick = 0

    @classmethod
    def from_layout(
        cls,
        positions,
        food: Cell,
        direction: Direction = INITIAL_DIRECTION,
        grid: Optional[Grid] = None,
        spawner: Optional[FoodSpawner] = None,
        initial_length: Optional[int] = None,
    ) -> "GameSimulation":
        """
        Build a running simulation from an explicit snake and food placement.

        Positions run head first. Restarting still returns to the standard
        centred layout of ``initial_length`` cells (INITIAL_LENGTH, or as
        long as fits on a narrow grid), which is also the shortest snake
        accepted here.
        """
        grid = grid or Grid()
        if initial_length is None:
            initial_length = min(INITIAL_LENGTH, grid.cols // 2 + 1)
        sim = cls(grid=grid, spawner=spawner, initial_length=initial_length)
        cells = [Cell(*p) for p in positions]
        if len(cells) < initial_length:
            raise ValueError(
                f"Snake of length {len(cells)} is shorter than the minimum {initial_length}."
            )
        for cell in cells + [Cell(*food)]:
            if not sim.grid.is_in_bounds(cell):
                raise ValueError(f"Cell {cell} is outside {sim.grid}.")
        if len(set(cells)) != len(cells):
            raise ValueError("Snake positions must not repeat.")
        if Cell(*food) in cells:
            raise ValueError(f"Food at {food} overlaps the snake.")
        sim.body = SnakeBody(cells, capacity=sim.grid.capacity)
        sim.food = Cell(*food)
        sim.direction = direction
        return sim

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def set_direction(self, direction: Direction) -> bool:
        """Change direction unless the game is over or it would reverse the snake."""
        if self.game_over or direction is self.direction.opposite:
            return False
        if direction is not self.direction:
            logger.debug("Direction %s -> %s", self.direction.name, direction.name)
        self.direction = direction
        return True

    def restart(self) -> bool:
        """Return to the starting layout; only honoured once the game is over."""
        if not self.game_over:
            return False
        logger.info("Restarting game (previous score %d)", self.score)
        self._reset()
        return True

    def advance(self) -> bool:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Compute the candidate head one cell along the current direction
          3) Wall or self collision ends the game
          4) Eating food grows the snake, scores a point and respawns food
          5) Commit the move

        Returns True if the snake moved.
        """
        if self.game_over:
            return False

        candidate = self.body.head().shifted(self.direction)

        if hits_wall(self.grid, candidate):
            self._end(DEATH_WALL)
            return False

        grow = candidate == self.food
        if hits_self(self.body, candidate, growing=grow):
            self._end(DEATH_SELF)
            return False

        self.body.advance(candidate, grow)
        self.tick += 1

        if grow:
            self.score += 1
            try:
                self.food = self.spawner.spawn(self.body)
            except BoardFullError:
                self.food = None
                self._end(DEATH_BOARD_FULL)
                return True
            logger.debug("Ate food at %s, score %d, new food at %s", candidate, self.score, self.food)

        return True

    def _end(self, reason: str) -> None:
        self.status = GameStatus.GAME_OVER
        self.death_reason = reason
        logger.info("Game over (%s) after %d moves, score %d", reason, self.tick, self.score)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final board:\n%s", self.snapshot().print_board())

    def snapshot(self) -> GameSnapshot:
        """Return a read-only view of the current state."""
        return GameSnapshot(
            snake=tuple(self.body),
            food=self.food,
            score=self.score,
            status=self.status,
            direction=self.direction,
            cols=self.grid.cols,
            rows=self.grid.rows,
            death_reason=self.death_reason,
            tick=self.tick,
        )

    def __repr__(self):
        return (
            f"<GameSimulation tick={self.tick}, status={self.status.value}, "
            f"food={self.food}, score={self.score}>"
        )
