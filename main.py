"""
Entry point for the snake game.

Run from the repository root:
    python main.py

Controls:
    - Arrow keys or W/A/S/D to move
    - R to restart after Game Over
    - Esc or Q to quit
Command-line arguments are ignored.
"""

import logging
import sys

import pygame

from config import DEFAULT_CONFIG, GameConfig, WINDOW_TITLE
from controls.translator import InputTranslator
from domain.food import FoodSpawner
from domain.grid import Grid
from domain.simulation import GameSimulation
from game_loop import GameLoop
from rendering.renderer import Renderer

logger = logging.getLogger(__name__)


def build_simulation(config: GameConfig = DEFAULT_CONFIG) -> GameSimulation:
    """Create the one simulation for this run, seeding the random source once."""
    grid = Grid(config.cols, config.rows)
    spawner = FoodSpawner(grid, seed=config.seed)
    return GameSimulation(grid=grid, spawner=spawner, initial_length=config.initial_length)


def main(config: GameConfig = DEFAULT_CONFIG) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        pygame.init()
        surface = pygame.display.set_mode(config.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error as exc:
        logger.error("Could not initialise the display: %s", exc)
        pygame.quit()
        return 1

    try:
        simulation = build_simulation(config)
        logger.info(
            "Starting %dx%d game, %d ms per move",
            config.cols, config.rows, config.move_delay_ms,
        )
        loop = GameLoop(
            simulation,
            Renderer(config),
            surface,
            translator=InputTranslator(),
            config=config,
        )
        loop.run()
    finally:
        pygame.quit()

    logger.info("Final score: %d", simulation.score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
