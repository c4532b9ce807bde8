"""Scenes: the shooting stage with the player, enemies and bullets."""

from __future__ import annotations

import abc
import random
from typing import Collection

import pygame

from .enemy import EnemyManager
from .enemy_bullets import EnemyBulletManager
from .items import ItemManager
from .player import Key, Player


class Scene(abc.ABC):
    """A stage of the game that advances and draws itself."""

    @abc.abstractmethod
    def update(self, dt: float, keys: Collection[Key]) -> None:
        """Advance by dt seconds with the given keys held."""

    @abc.abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw onto surface."""


class ShootingScene(Scene):
    """The main stage: a player facing a stream of enemies."""

    def __init__(self, rng: random.Random | None = None):
        rng = rng if rng is not None else random.Random()
        self.bullets = EnemyBulletManager()
        self.items = ItemManager(rng=rng)
        self.player = Player(self.items)
        self.enemies = EnemyManager(self.bullets, self.player, rng=rng)

    def update(self, dt: float, keys: Collection[Key]) -> None:
        self.player.update(dt, keys)
        self.bullets.update(dt)
        self.enemies.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        self.player.render(surface)
        self.bullets.render(surface)
        self.enemies.render(surface)