"""Frame timing: delta time and frames-per-second reporting."""

from __future__ import annotations

import time
from typing import Callable

DEBUG_MAX_DT = 1.0 / 60.0
"""Cap applied to delta time in debug runs to avoid huge steps."""


class TimeManager:
    """Measures the time between frames and counts frames per second."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        max_dt: float | None = None,
    ) -> None:
        self._clock = clock
        self._max_dt = max_dt
        self._prev = clock()
        self._acc = 0.0
        self._calls = 0
        self.dt = 0.0
        self.fps = 0

    def update(self) -> float:
        """Sample the clock and return the time since the previous sample."""
        now = self._clock()
        self.dt = now - self._prev
        self._prev = now
        if self._max_dt is not None and self.dt > self._max_dt:
            self.dt = self._max_dt
        return self.dt

    def tick(self) -> str | None:
        """Count a rendered frame; once a second has passed return a status line."""
        self._calls += 1
        self._acc += self.dt
        if self._acc < 1.0:
            return None
        self.fps = self._calls
        self._acc = 0.0
        self._calls = 0
        return f"FPS : {self.fps} DT : {self.dt:f}"