"""Projectiles that travel in a straight line until they leave the screen."""

from __future__ import annotations

from .circle import SCREEN_HEIGHT, SCREEN_WIDTH, Circle
from .vector2 import Vector2


class Bullet(Circle):
    """A small circle moving at a fixed speed along its direction."""

    RADIUS = 10
    SPEED = 500.0

    def __init__(self):
        super().__init__(self.RADIUS)
        self.tag = ""
        self.direction = Vector2.up()

    def update(self, dt: float) -> None:
        """Advance by dt seconds and deactivate once off screen."""
        self.center += self.direction * self.SPEED * dt
        x, y = self.center
        if y < 0 or y > SCREEN_HEIGHT or x < 0 or x > SCREEN_WIDTH:
            self.active = False

    def fire(self, pos: Vector2, direction: Vector2 | None = None) -> None:
        """Launch from pos along direction (upwards by default)."""
        self.direction = (direction if direction is not None else Vector2.up()).normalized()
        self.active = True
        self.center = pos