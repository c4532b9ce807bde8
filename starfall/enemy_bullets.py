"""A fixed pool of enemy bullets."""

from __future__ import annotations

from typing import Iterator

import pygame

from .bullet import Bullet
from .circle import Circle
from .vector2 import Vector2

DEFAULT_POOL_SIZE = 300
BULLET_COLOR = (0, 0, 0)


class EnemyBulletManager:
    """Owns a pool of bullets, firing free ones and testing them for hits."""

    def __init__(self, pool_size: int = DEFAULT_POOL_SIZE):
        self.bullets = [Bullet() for _ in range(pool_size)]
        for bullet in self.bullets:
            bullet.active = False

    def update(self, dt: float) -> None:
        for bullet in self.bullets:
            bullet.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        for bullet in self.bullets:
            bullet.render(surface, BULLET_COLOR)

    def collide(self, circle: Circle, tag: str = "") -> bool:
        """Consume the first active bullet touching circle; report whether one did."""
        for bullet in self.active_bullets():
            if bullet.collides_circle(circle):
                bullet.active = False
                return True
        return False

    def fire(self, pos: Vector2, tag: str = "", direction: Vector2 | None = None) -> Bullet | None:
        """Fire the first free bullet; return it, or None if the pool is exhausted."""
        for bullet in self.bullets:
            if not bullet.active:
                bullet.tag = tag
                bullet.fire(pos, direction)
                return bullet
        return None

    def active_bullets(self) -> Iterator[Bullet]:
        """The bullets currently in flight."""
        return (bullet for bullet in self.bullets if bullet.active)