"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop, window and clock.
  - Translate raw keyboard events into a snapshot of just-pressed Keys.
  - Drive the game loop: advance the model once per tick, ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys
from typing import Iterable

import pygame

from .config import WIDTH, HEIGHT, TPS, WINDOW_TITLE
from .model import GameModel, Key, QuitGame
from .view import GameView

logger = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_UP:     Key.UP,
    pygame.K_DOWN:   Key.DOWN,
    pygame.K_LEFT:   Key.LEFT,
    pygame.K_RIGHT:  Key.RIGHT,
    pygame.K_h:      Key.H,
    pygame.K_j:      Key.J,
    pygame.K_k:      Key.K,
    pygame.K_l:      Key.L,
    pygame.K_q:      Key.Q,
    pygame.K_EQUALS: Key.EQUAL,
    pygame.K_MINUS:  Key.MINUS,
    pygame.K_SPACE:  Key.SPACE,
}


def pressed_keys(events: Iterable[pygame.event.Event]) -> frozenset:
    """Keys pressed in this batch of events. Closing the window counts as Q."""
    pressed = set()
    for event in events:
        if event.type == pygame.QUIT:
            pressed.add(Key.Q)
        elif event.type == pygame.KEYDOWN and event.key in KEY_MAP:
            pressed.add(KEY_MAP[event.key])
    return frozenset(pressed)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, seed=None):
        pygame.init()
        info = pygame.display.Info()
        self.screen = pygame.display.set_mode(self.layout(info.current_w, info.current_h))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.model = GameModel(tps=TPS, seed=seed)
        self.view  = GameView(self.screen)

    @staticmethod
    def layout(outside_w: int, outside_h: int) -> tuple[int, int]:
        """Logical resolution, whatever the outer window size."""
        return WIDTH, HEIGHT

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            self.clock.tick(TPS)
            try:
                self.model.advance(pressed_keys(pygame.event.get()))
            except QuitGame:
                self._quit()
            self.view.render(self.model)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        logger.info("quit requested")
        pygame.quit()
        sys.exit(0)
