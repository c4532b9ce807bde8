import pygame
import pytest

from starfall.timer import TEXT_COLOR, Timer


def make_timer(times):
    ticks = iter(times)
    return Timer(clock=lambda: next(ticks))


def test_initial_lines():
    timer = make_timer([0.0])
    assert timer.lines() == ["FPS : 0", "ElapsedTime : 0.000000"]


def test_elapsed_time_is_difference_between_ticks():
    timer = make_timer([2.0, 2.25, 3.0])
    timer.update()
    assert timer.elapsed_time == pytest.approx(0.25)
    timer.update()
    assert timer.elapsed_time == pytest.approx(0.75)


def test_frame_rate_set_after_one_second():
    timer = make_timer([0.0, 0.25, 0.5, 0.75, 1.0])
    for _ in range(3):
        timer.update()
    assert timer.frame_rate == 0
    timer.update()
    assert timer.frame_rate == 4


def test_lines_reflect_measurements():
    timer = make_timer([0.0, 0.25, 0.5, 0.75, 1.0])
    for _ in range(4):
        timer.update()
    assert timer.lines() == ["FPS : 4", "ElapsedTime : 0.250000"]


def test_counter_restarts_each_second():
    times = [0.5 * i for i in range(7)]
    timer = make_timer(times)
    for _ in range(2):
        timer.update()
    first = timer.frame_rate
    for _ in range(4):
        timer.update()
    assert timer.frame_rate == first == 2


def test_default_clock_gives_non_negative_elapsed():
    timer = Timer()
    timer.update()
    assert timer.elapsed_time >= 0.0


class _FakeFont:
    def __init__(self):
        self.texts = []

    def render(self, text, antialias, color):
        self.texts.append(text)
        surface = pygame.Surface((len(text) * 2, 10))
        surface.fill(color)
        return surface


def test_render_draws_each_line():
    timer = make_timer([0.0, 0.5])
    timer.update()
    font = _FakeFont()
    surface = pygame.Surface((200, 100))
    surface.fill((255, 255, 255))
    timer.render(surface, font)
    assert font.texts == timer.lines()
    assert surface.get_at((0, 0)) == pygame.Color(*TEXT_COLOR)
    assert surface.get_at((0, 20)) == pygame.Color(*TEXT_COLOR)
    assert surface.get_at((0, 50)) == pygame.Color(255, 255, 255)