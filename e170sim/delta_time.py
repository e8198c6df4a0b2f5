"""Measures the wall-clock time between simulation ticks."""

from __future__ import annotations

import time
from collections.abc import Callable


class DeltaTime:
    """Tracks the time elapsed since the previous call to ``update_time``."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last_time = clock()

    def update_time(self) -> float:
        """Return seconds since the last call (or since creation) and restart the timer."""
        now = self._clock()
        delta = now - self._last_time
        self._last_time = now
        return delta