"""
Key bindings.

  - Arrow keys or W/A/S/D to move
  - R to restart after Game Over
  - Esc or Q to quit
"""

from enum import Enum

import pygame

from domain.constants import Direction


class Command(Enum):
    RESTART = "restart"
    QUIT = "quit"


KEY_BINDINGS = {
    pygame.K_UP:     Direction.UP,
    pygame.K_w:      Direction.UP,
    pygame.K_DOWN:   Direction.DOWN,
    pygame.K_s:      Direction.DOWN,
    pygame.K_LEFT:   Direction.LEFT,
    pygame.K_a:      Direction.LEFT,
    pygame.K_RIGHT:  Direction.RIGHT,
    pygame.K_d:      Direction.RIGHT,
    pygame.K_r:      Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q:      Command.QUIT,
}
