"""The player's ship: movement, drawing, special gauge and item pickup."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Collection

import pygame

from .circle import SCREEN_HEIGHT, SCREEN_WIDTH, Circle
from .vector2 import Vector2

if TYPE_CHECKING:
    from .items import ItemManager

ORIGINAL_COLOR = (250, 200, 130)
DAMAGE_COLOR = (250, 100, 100)


class Key(enum.Enum):
    """Controls the player responds to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    Q = enum.auto()


class Player(Circle):
    """The player's ship, drawn as a star of lines inside its bounding box."""

    RADIUS = 30
    MAX_SPEED = 100.0
    PEN_WIDTH = 5
    MAX_SPECIAL_GAUGE = 10

    def __init__(self, items: ItemManager | None = None):
        super().__init__(self.RADIUS, Vector2(SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.9))
        self.items = items
        self.health_point = 100
        self.special_gauge = 0
        self.speed = 10.0
        self.bullet_speed = 10.0
        self.bullet_power = 10
        self.color = ORIGINAL_COLOR

    def update(self, dt: float, keys: Collection[Key]) -> list[str]:
        """Advance one frame; return any item notices produced."""
        self.move(dt, keys)
        self.color = self._pen_color()
        return self.item_get()

    def move(self, dt: float, keys: Collection[Key]) -> None:
        """Move in at most one direction, the first pressed key that is not blocked."""
        step = dt * self.speed
        x, y = self.center
        if Key.LEFT in keys and x > 0:
            self.center = Vector2(x - step, y)
        elif Key.RIGHT in keys and x < SCREEN_WIDTH:
            self.center = Vector2(x + step, y)
        elif Key.UP in keys and y > 0:
            self.center = Vector2(x, y - step)
        elif Key.DOWN in keys and y < SCREEN_HEIGHT:
            self.center = Vector2(x, y + step)

    def outline(self) -> list[tuple[Vector2, Vector2]]:
        """The line segments the ship is drawn with."""
        cx, cy = self.center
        left, top = cx - self.radius, cy - self.radius
        right, bottom = cx + self.radius, cy + self.radius
        return [
            (Vector2(cx, top), Vector2(left, bottom)),
            (Vector2(cx, top), Vector2(right, bottom)),
            (Vector2(left, bottom), Vector2(right, bottom)),
            (Vector2(cx, bottom), Vector2(left, cy)),
            (Vector2(cx, bottom), Vector2(right, cy)),
            (Vector2(left, cy), Vector2(right, cy)),
        ]

    def render(self, surface: pygame.Surface) -> None:
        for start, end in self.outline():
            pygame.draw.line(
                surface,
                self.color,
                (int(start.x), int(start.y)),
                (int(end.x), int(end.y)),
                self.PEN_WIDTH,
            )

    def special_fire(self, keys: Collection[Key]) -> bool:
        """Spend a full special gauge when Q is pressed; report whether it fired."""
        if Key.Q in keys and self.special_gauge == self.MAX_SPECIAL_GAUGE:
            self.special_gauge = 0
            return True
        return False

    def item_get(self) -> list[str]:
        """Collect upgrades if touching an item; return the notices."""
        if self.items is not None and self.items.collides(self):
            return self.items.random_item(self)
        return []

    def _pen_color(self):
        return ORIGINAL_COLOR