"""
Fixed-timestep game loop.

One thread does everything: each frame drains pending input events, moves
the snake when a full tick period has elapsed, renders a snapshot and
presents it, then sleeps briefly so the loop does not spin the CPU. The
tick period is independent of (and slower than) the frame rate.
"""

import logging
from typing import Callable, Iterable, Optional

import pygame

from config import DEFAULT_CONFIG, GameConfig
from controls.translator import InputTranslator
from domain.simulation import GameSimulation
from rendering.renderer import Renderer

logger = logging.getLogger(__name__)


class FixedStepTicker:
    """
    Reports when a tick is due.

    At most one tick fires per check; the last-tick timestamp jumps to the
    time of the check rather than accumulating missed periods.
    """

    def __init__(self, interval_ms: int, now_ms: int = 0):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}.")
        self.interval_ms = interval_ms
        self.last_ms = now_ms

    def reset(self, now_ms: int) -> None:
        self.last_ms = now_ms

    def due(self, now_ms: int) -> bool:
        if now_ms - self.last_ms >= self.interval_ms:
            self.last_ms = now_ms
            return True
        return False


class GameLoop:
    """
    Drives a GameSimulation with input, a ticker and a renderer.

    The pygame hooks (clock, event queue, display flip, delay) are
    injectable so the loop can run without a window.
    """

    def __init__(
        self,
        simulation: GameSimulation,
        renderer: Renderer,
        surface: pygame.Surface,
        translator: Optional[InputTranslator] = None,
        config: GameConfig = DEFAULT_CONFIG,
        get_ticks: Callable[[], int] = pygame.time.get_ticks,
        poll_events: Callable[[], Iterable] = pygame.event.get,
        present: Callable[[], None] = pygame.display.flip,
        sleep: Callable[[int], object] = pygame.time.delay,
    ):
        self.simulation = simulation
        self.renderer = renderer
        self.surface = surface
        self.translator = translator or InputTranslator()
        self.config = config
        self.get_ticks = get_ticks
        self.poll_events = poll_events
        self.present = present
        self.sleep = sleep

        self.running = True
        self.frames = 0
        self.ticker = FixedStepTicker(config.move_delay_ms, get_ticks())

    def request_stop(self) -> None:
        self.running = False

    def on_restart(self) -> None:
        """The first move after a restart waits a full tick period."""
        self.ticker.reset(self.get_ticks())

    def process_events(self) -> None:
        for event in self.poll_events():
            self.translator.apply(self.translator.translate(event), self.simulation, self)

    def run_frame(self) -> None:
        self.process_events()

        now = self.get_ticks()
        if not self.simulation.game_over and self.ticker.due(now):
            self.simulation.advance()

        self.renderer.draw(self.surface, self.simulation.snapshot())
        self.present()
        self.frames += 1

    def run(self, max_frames: Optional[int] = None) -> int:
        """Loop until stopped (or ``max_frames`` frames); return the frame count."""
        while self.running:
            if max_frames is not None and self.frames >= max_frames:
                break
            self.run_frame()
            self.sleep(self.config.frame_delay_ms)
        logger.info("Game loop stopped after %d frames", self.frames)
        return self.frames
