import random

import pygame
import pytest

from starfall.circle import SCREEN_HEIGHT, SCREEN_WIDTH
from starfall.enemy import EnemyManager
from starfall.player import ORIGINAL_COLOR, Key
from starfall.scene import Scene, ShootingScene


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_enemies_share_the_player():
    scene = ShootingScene(random.Random(0))
    assert all(enemy.player is scene.player for enemy in scene.enemies.enemies)
    assert all(enemy.bullets is scene.bullets for enemy in scene.enemies.enemies)
    assert scene.player.items is scene.items


def test_update_moves_player():
    scene = ShootingScene(random.Random(0))
    start = scene.player.center
    scene.update(0.5, {Key.LEFT})
    assert scene.player.center.x < start.x


def test_update_spawns_enemy_after_interval():
    scene = ShootingScene(random.Random(0))
    scene.update(EnemyManager.SPAWN_INTERVAL + 0.1, set())
    assert sum(enemy.active for enemy in scene.enemies.enemies) == 1


def test_render_draws_player():
    scene = ShootingScene(random.Random(0))
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    scene.render(surface)
    cx, cy = int(scene.player.center.x), int(scene.player.center.y)
    assert tuple(surface.get_at((cx, cy)))[:3] == ORIGINAL_COLOR