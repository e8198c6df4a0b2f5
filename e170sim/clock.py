"""The cockpit clock: UTC, elapsed time (ET) and chrono (CHR) functions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class ClockMode(enum.Enum):
    """The function the clock is showing."""

    UTC = "utc"
    ET = "et"
    CHR = "chr"


def _whole_seconds(dt: float) -> int:
    """Truncate a time step to a whole, non-negative count."""
    if math.isnan(dt) or dt <= 0.0:
        return 0
    return int(dt)


@dataclass
class Clock:
    """Counts time and records it in the register of the active mode."""

    mode: ClockMode = ClockMode.UTC
    time: int = 0
    utc: int = 0
    et: int = 0

    def update(self, dt: float) -> None:
        """Advance the clock by the whole part of ``dt``."""
        self.time += _whole_seconds(dt)
        if self.mode is ClockMode.UTC:
            self.utc = self.time
        elif self.mode is ClockMode.ET:
            self.et = self.time