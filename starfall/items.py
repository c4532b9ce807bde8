"""Power-up items and the pool that hands them out."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pygame

from .circle import Circle
from .vector2 import Vector2

if TYPE_CHECKING:
    from .player import Player

DEFAULT_POOL_SIZE = 10
ITEM_COLOR = (0, 180, 0)

SPEED_UP_MESSAGE = "PLAYER SPEED UP!"
BULLET_SPEED_UP_MESSAGE = "BULLET SPEED UP!"
BULLET_POWER_UP_MESSAGE = "BULLET POWER UP!"
BULLET_LINE_MESSAGE = "PLAYER GUN ADDED!"


class Item(Circle):
    """A collectable circle that can upgrade the player in one of several ways."""

    RADIUS = 20
    ADD_SPEED = 5.0
    ADD_BULLET_SPEED = 5.0
    ADD_BULLET_POWER = 5

    def __init__(self):
        super().__init__(self.RADIUS)

    def upgrade_speed(self, player: Player) -> str:
        """Raise the player's movement speed; return the notice to show."""
        player.speed += self.ADD_SPEED
        return SPEED_UP_MESSAGE

    def upgrade_bullet_speed(self, player: Player) -> str:
        """Raise the player's bullet speed; return the notice to show."""
        player.bullet_speed += self.ADD_BULLET_SPEED
        return BULLET_SPEED_UP_MESSAGE

    def upgrade_bullet_power(self, player: Player) -> str:
        """Raise the player's bullet power; return the notice to show."""
        player.bullet_power += self.ADD_BULLET_POWER
        return BULLET_POWER_UP_MESSAGE

    def add_bullet_line(self, player: Player) -> str:
        """Announce an extra gun for the player; return the notice to show."""
        return BULLET_LINE_MESSAGE


_UPGRADES = (
    Item.upgrade_speed,
    Item.upgrade_bullet_speed,
    Item.upgrade_bullet_power,
    Item.add_bullet_line,
)


class ItemManager:
    """A fixed pool of items that can be placed on the field and picked up."""

    def __init__(self, pool_size: int = DEFAULT_POOL_SIZE, rng: random.Random | None = None):
        self.items = [Item() for _ in range(pool_size)]
        for item in self.items:
            item.active = False
        self._rng = rng if rng is not None else random.Random()

    def update(self) -> None:
        """Items stay where they were placed, so a frame changes nothing."""

    def render(self, surface: pygame.Surface) -> None:
        for item in self.items:
            item.render(surface, ITEM_COLOR)

    def collides(self, player: Player) -> bool:
        """Whether any active item touches the player."""
        return any(item.active and item.collides_circle(player) for item in self.items)

    def random_item(self, player: Player) -> list[str]:
        """Apply a randomly chosen upgrade for every active item; return the notices."""
        notices = []
        for item in self.items:
            if not item.active:
                continue
            upgrade = _UPGRADES[self._rng.randrange(len(_UPGRADES))]
            notices.append(upgrade(item, player))
        return notices

    def spawn(self, pos: Vector2) -> Item | None:
        """Place the first free item at pos; return it, or None if none is free."""
        for item in self.items:
            if not item.active:
                item.center = pos
                item.active = True
                return item
        return None