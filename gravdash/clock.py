"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Clock:
    """Tracks the milliseconds that pass between frames."""

    def __init__(self, time_source: Optional[Callable[[], int]] = None) -> None:
        self._source = time_source or _monotonic_ms
        self._start = self._source()
        self._last_frame = self._start
        self._speed = 1.0
        self._delta = 0

    def update(self) -> None:
        """Measure the time since the previous update."""
        now = self._source()
        self._delta = int((now - self._last_frame) * self._speed)
        self._last_frame = now

    def delta(self) -> int:
        """Return the milliseconds between the last two updates, scaled by speed."""
        return self._delta

    def elapsed(self) -> int:
        """Return the milliseconds since the clock was created."""
        return int(self._source() - self._start)

    def set_speed(self, speed: float) -> None:
        """Set how fast the clock runs relative to real time."""
        if speed < 0:
            raise ValueError("clock speed cannot be negative")
        self._speed = speed