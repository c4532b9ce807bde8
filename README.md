# starfall

A small vertical arcade shooter on a 600×800 playfield. Your ship starts
near the bottom of the screen while enemies appear on the top edge and
drift slowly downwards, firing a volley once a second. The pattern an
enemy fires depends on how long it has been active:

* under 5 seconds: one shot aimed at the ship;
* from 5 to 30 seconds: a half-ring fan of five bullets;
* from 30 to 60 seconds: a full ring of ten bullets;
* after that it stops firing.

A new enemy is placed at a random horizontal position every two seconds,
from a pool of 50. Enemies lose health when any bullet in flight touches
them (the bullet is used up), turn red for a moment when hit, and vanish
when their health runs out or when they pass the bottom of the screen.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the keyboard.

## Playing

```
starfall
starfall --seed 42
```

`--seed` fixes the random number generator used for enemy positions and
item upgrades, so a run can be repeated.

The arrow keys move the ship, one direction at a time (left takes
precedence over right, right over up, up over down). The frame rate and
the duration of the last frame are shown in the top-left corner. Close
the window to quit.

## What the game does not do

The game is a playable sketch rather than a finished shooter:

* the ship does not fire, and enemy bullets do not harm it; there is no
  score, no lives and no game over;
* no items are placed on the field during play, so upgrades are only
  reachable through `ItemManager.spawn()` from code;
* the special attack (`Player.special_fire()`) is not wired to the game
  loop, and nothing fills the special gauge.

## Using it as a library

Every piece can be driven without a window:

* `starfall.vector2.Vector2` – an immutable 2D vector with `+`, `-`,
  scalar `*`, `magnitude()`, `sqr_magnitude()`, `normalized()` (raises
  `ZeroDivisionError` for a zero vector) and the `zero()`, `one()`,
  `up()`, `down()`, `left()`, `right()` constructors, in screen
  coordinates (`up()` is `(0, -1)`).
* `starfall.circle.Circle` – the base shape with an integer radius,
  a `center` and an `active` flag; `collides_point()`,
  `collides_circle()` and `render(surface, color)`.
* `starfall.bullet.Bullet` – moves at 500 pixels per second and
  deactivates once it leaves the screen.
* `starfall.enemy_bullets.EnemyBulletManager` – a fixed pool of bullets
  (300 by default); `fire()` launches the first idle bullet and returns
  it (or `None` when the pool is exhausted), `collide()` consumes the
  first active bullet touching a circle, `active_bullets()` yields the
  bullets in flight.
* `starfall.enemy.Enemy` and `starfall.enemy.EnemyManager` – enemies and
  their spawner; pass a `random.Random` for repeatable runs.
* `starfall.player.Player` and `starfall.player.Key` – the ship;
  `update(dt, keys)` moves it and collects items, returning the notices
  of any upgrades; `outline()` gives the line segments it is drawn with.
* `starfall.items.Item` and `starfall.items.ItemManager` – pick-ups that
  raise the ship's speed, bullet speed or bullet power, or announce an
  extra gun; each upgrade method returns the notice text.
* `starfall.scene.Scene` and `starfall.scene.ShootingScene` – the stage;
  call `update(dt, keys)` each frame with the elapsed seconds and the set
  of held `Key` values, and `render(surface)` to draw it.
* `starfall.timer.Timer` – frame timing with an injectable clock;
  `lines()` returns the on-screen status text.
* `starfall.game.GameManager` – advances a scene by one frame with
  `step(keys)` and draws it with `render(surface, font)`;
  `starfall.game.main()` runs the window.

## Running the tests

```
pip install .[test]
pytest
```