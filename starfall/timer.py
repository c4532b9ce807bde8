"""Frame timing and a frames-per-second counter."""

from __future__ import annotations

import time
from typing import Callable

import pygame

TEXT_COLOR = (0, 0, 0)
LINE_SPACING = 20


class Timer:
    """Measures time between frames and counts frames over each second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._last_time = clock()
        self.frame_rate = 0
        self.elapsed_time = 0.0
        self._frame_count = 0
        self._one_second_count = 0.0

    def update(self) -> None:
        """Record a new frame."""
        current = self._clock()
        self.elapsed_time = current - self._last_time
        self._last_time = current

        self._frame_count += 1
        self._one_second_count += self.elapsed_time
        if self._one_second_count >= 1.0:
            self.frame_rate = self._frame_count
            self._frame_count = 0
            self._one_second_count = 0.0

    def lines(self) -> list[str]:
        """The status lines shown on screen."""
        return [f"FPS : {self.frame_rate}", f"ElapsedTime : {self.elapsed_time:f}"]

    def render(self, surface: pygame.Surface, font) -> None:
        """Draw the status lines at the top-left corner."""
        for row, text in enumerate(self.lines()):
            surface.blit(font.render(text, True, TEXT_COLOR), (0, row * LINE_SPACING))