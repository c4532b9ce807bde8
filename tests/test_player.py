import random

import pygame
import pytest

from starfall.circle import SCREEN_HEIGHT, SCREEN_WIDTH
from starfall.items import ItemManager
from starfall.player import ORIGINAL_COLOR, Key, Player
from starfall.vector2 import Vector2


def test_starts_near_bottom_center():
    player = Player()
    assert player.center == Vector2(SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.9)
    assert player.special_gauge == 0
    assert player.color == ORIGINAL_COLOR


@pytest.mark.parametrize(
    "key, axis, sign",
    [(Key.LEFT, "x", -1), (Key.RIGHT, "x", 1), (Key.UP, "y", -1), (Key.DOWN, "y", 1)],
)
def test_move_each_direction(key, axis, sign):
    player = Player()
    start = player.center
    player.move(0.5, {key})
    moved = getattr(player.center, axis) - getattr(start, axis)
    assert moved == pytest.approx(sign * 0.5 * player.speed)


def test_left_wins_over_right():
    player = Player()
    start = player.center
    player.move(1.0, {Key.LEFT, Key.RIGHT})
    assert player.center.x < start.x
    assert player.center.y == start.y


def test_blocked_left_falls_through_to_right():
    player = Player()
    player.center = Vector2(0.0, 100.0)
    player.move(1.0, {Key.LEFT, Key.RIGHT})
    assert player.center.x > 0.0


def test_no_keys_no_motion():
    player = Player()
    start = player.center
    player.move(1.0, set())
    assert player.center == start


def test_special_fire_needs_full_gauge():
    player = Player()
    assert player.special_fire({Key.Q}) is False
    player.special_gauge = Player.MAX_SPECIAL_GAUGE
    assert player.special_fire(set()) is False
    assert player.special_fire({Key.Q}) is True
    assert player.special_gauge == 0


def test_outline_inside_bounding_box():
    player = Player()
    segments = player.outline()
    assert len(segments) == 6
    for start, end in segments:
        for point in (start, end):
            assert abs(point.x - player.center.x) <= player.radius
            assert abs(point.y - player.center.y) <= player.radius
    assert segments[0][0] == Vector2(player.center.x, player.center.y - player.radius)


def test_render_draws_center_line():
    player = Player()
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    player.render(surface)
    cx, cy = int(player.center.x), int(player.center.y)
    assert tuple(surface.get_at((cx, cy)))[:3] == ORIGINAL_COLOR
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_item_get_without_items():
    assert Player().item_get() == []


def test_item_get_collects_upgrade():
    items = ItemManager(pool_size=2, rng=random.Random(0))
    player = Player(items)
    items.spawn(player.center)
    notices = player.item_get()
    assert len(notices) == 1


def test_update_returns_item_notices_and_moves():
    items = ItemManager(pool_size=1, rng=random.Random(0))
    player = Player(items)
    start = player.center
    items.spawn(start)
    notices = player.update(0.1, {Key.UP})
    assert player.center.y < start.y
    assert len(notices) == 1