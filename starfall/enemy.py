"""Enemies that drift down the screen firing in phases, and their spawner."""

from __future__ import annotations

import math
import random

import pygame

from .circle import SCREEN_HEIGHT, SCREEN_WIDTH, Circle
from .enemy_bullets import EnemyBulletManager
from .player import Player
from .vector2 import Vector2

NORMAL_COLOR = (0, 0, 255)
DAMAGED_COLOR = (255, 0, 0)
DEFAULT_POOL_SIZE = 50
BULLET_TAG = "Enemy"
HIT_TAG = "player"


class Enemy(Circle):
    """An enemy that takes hits from bullets and fires aimed shots or rings."""

    RADIUS = 30
    SPEED = 300
    MAX_HP = 30
    DAMAGE = 10
    DAMAGE_INTERVAL = 0.3
    FIRE_INTERVAL = 1.0
    FIRE_COUNT = 10
    AIMED_PHASE_END = 5.0
    HALF_RING_PHASE_END = 30.0
    FULL_RING_PHASE_END = 60.0

    def __init__(self, bullets: EnemyBulletManager, player: Player | None = None):
        super().__init__(self.RADIUS)
        self.bullets = bullets
        self.player = player
        self.hp = 0
        self.phase_timer = 0.0
        self.damage_timer = 0.0
        self.fire_timer = 0.0
        self.damaged = False
        self.color = NORMAL_COLOR

    def update(self, dt: float) -> None:
        if not self.active:
            return
        self._move(dt)
        self._take_damage(dt)
        self._fire(dt)

    def render(self, surface: pygame.Surface) -> None:
        if not self.active:
            return
        super().render(surface, self.color)

    def spawn(self, pos: Vector2) -> None:
        """Bring the enemy to life at pos with full health."""
        self.center = pos
        self.hp = self.MAX_HP
        self.damaged = False
        self.color = NORMAL_COLOR
        self.active = True

    def _move(self, dt: float) -> None:
        self.center = Vector2(self.center.x, self.center.y + dt)
        if self.center.y > SCREEN_HEIGHT:
            self.active = False

    def _take_damage(self, dt: float) -> None:
        if self.damaged:
            self.damage_timer += dt
            if self.damage_timer >= self.DAMAGE_INTERVAL:
                self.damage_timer = 0.0
                self.damaged = False
                self.color = NORMAL_COLOR
        if self.bullets.collide(self, HIT_TAG):
            self.hp -= self.DAMAGE
            self.damaged = True
            self.color = DAMAGED_COLOR
            if self.hp <= 0:
                self.active = False

    def _fire(self, dt: float) -> None:
        self.phase_timer += dt
        self.fire_timer += dt
        if self.fire_timer < self.FIRE_INTERVAL:
            return
        self.fire_timer = 0.0
        for direction in self._volley():
            self.bullets.fire(self.center, BULLET_TAG, direction)

    def _volley(self) -> list[Vector2]:
        step = math.pi * 2.0 / self.FIRE_COUNT
        phase = self.phase_timer
        if phase < self.AIMED_PHASE_END:
            if self.player is None:
                return []
            aim = self.player.center - self.center
            return [aim] if aim.sqr_magnitude() > 0 else []
        if phase < self.HALF_RING_PHASE_END:
            angles = [step * (i + 1) for i in range(self.FIRE_COUNT // 2)]
        elif phase < self.FULL_RING_PHASE_END:
            angles = [step * i for i in range(self.FIRE_COUNT)]
        else:
            return []
        return [Vector2(math.cos(angle), math.sin(angle)) for angle in angles]


class EnemyManager:
    """A fixed pool of enemies, one of which is spawned every interval."""

    SPAWN_INTERVAL = 2.0

    def __init__(
        self,
        bullets: EnemyBulletManager,
        player: Player | None = None,
        pool_size: int = DEFAULT_POOL_SIZE,
        rng: random.Random | None = None,
    ):
        self.enemies = [Enemy(bullets, player) for _ in range(pool_size)]
        for enemy in self.enemies:
            enemy.active = False
        self.spawn_timer = 0.0
        self._rng = rng if rng is not None else random.Random()

    def update(self, dt: float) -> None:
        self.spawn_timer += dt
        if self.spawn_timer > self.SPAWN_INTERVAL:
            self.spawn_timer = 0.0
            self.spawn_enemy()
        for enemy in self.enemies:
            enemy.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        for enemy in self.enemies:
            enemy.render(surface)

    def spawn_enemy(self) -> Enemy | None:
        """Spawn the first free enemy at a random x on the top edge."""
        x = float(self._rng.randrange(SCREEN_WIDTH))
        for enemy in self.enemies:
            if not enemy.active:
                enemy.spawn(Vector2(x, 0.0))
                return enemy
        return None