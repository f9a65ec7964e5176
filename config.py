"""
Runtime configuration for the snake game.

Fixed configuration for this game (keep in code, not env vars).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from domain.constants import GRID_COLS, GRID_ROWS, INITIAL_LENGTH

WINDOW_TITLE = "Snake"


@dataclass(frozen=True)
class GameConfig:
    cols: int = GRID_COLS
    rows: int = GRID_ROWS
    cell_size: int = 20
    top_margin: int = 56
    initial_length: int = INITIAL_LENGTH
    move_delay_ms: int = 100  # ms per move
    frame_delay_ms: int = 8   # pause between frames
    seed: Optional[int] = None

    @property
    def window_size(self) -> Tuple[int, int]:
        return (self.cols * self.cell_size, self.rows * self.cell_size + self.top_margin)


DEFAULT_CONFIG = GameConfig()
