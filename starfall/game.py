"""The game loop: timing, scene updates, drawing and the window."""

from __future__ import annotations

import argparse
import random
from typing import Collection

import pygame

from .circle import SCREEN_HEIGHT, SCREEN_WIDTH
from .player import Key
from .scene import Scene, ShootingScene
from .timer import Timer

TITLE = "Starfall"
BACKGROUND = (255, 255, 255)
FONT_SIZE = 20

_KEY_BINDINGS = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.Q: pygame.K_q,
}


class GameManager:
    """Drives a scene with a frame timer and draws each frame."""

    def __init__(self, scene: Scene, timer: Timer | None = None):
        self.scene = scene
        self.timer = timer if timer is not None else Timer()

    def step(self, keys: Collection[Key]) -> None:
        """Advance one frame with the given keys held."""
        self.timer.update()
        self.scene.update(self.timer.elapsed_time, keys)

    def render(self, surface: pygame.Surface, font) -> None:
        """Clear to white, draw the scene and then the timing overlay."""
        surface.fill(BACKGROUND)
        self.scene.render(surface)
        self.timer.render(surface, font)


def _pressed_keys(pressed) -> frozenset[Key]:
    return frozenset(key for key, code in _KEY_BINDINGS.items() if pressed[code])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="starfall", description="A vertical shooting game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy and item randomness")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        game = GameManager(ShootingScene(random.Random(args.seed)))
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            game.step(_pressed_keys(pygame.key.get_pressed()))
            game.render(screen, font)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0