"""Circular game objects with collision tests and drawing."""

from __future__ import annotations

from typing import Iterable

import pygame

from .vector2 import Vector2

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 800


class Circle:
    """A circle with an integer radius, a center and an active flag."""

    def __init__(self, radius: int, center: Vector2 | None = None, active: bool = True):
        self.radius = radius
        self.center = center if center is not None else Vector2.zero()
        self.active = active

    def collides_point(self, point: Iterable[float]) -> bool:
        """Whether the point lies within the circle, using truncated offsets."""
        px, py = point
        dx = int(self.center.x - px)
        dy = int(self.center.y - py)
        return dx * dx + dy * dy <= self.radius * self.radius

    def collides_circle(self, other: Circle) -> bool:
        """Whether this circle touches or overlaps another."""
        dx = int(self.center.x - other.center.x)
        dy = int(self.center.y - other.center.y)
        reach = self.radius + other.radius
        return dx * dx + dy * dy <= reach * reach

    def render(self, surface: pygame.Surface, color) -> None:
        """Draw the circle filled with color, if active."""
        if not self.active:
            return
        left = int(self.center.x - self.radius)
        top = int(self.center.y - self.radius)
        right = int(self.center.x + self.radius)
        bottom = int(self.center.y + self.radius)
        pygame.draw.ellipse(surface, color, pygame.Rect(left, top, right - left, bottom - top))