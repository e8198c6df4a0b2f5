"""The chronometer that shows hours and minutes to the flight crew."""

from __future__ import annotations

from dataclasses import dataclass, field

_SECONDS_PER_MINUTE = 60.0
_MINUTES_PER_HOUR = 60


@dataclass
class Chronometer:
    """Holds the hours and minutes on display."""

    hours: int = 0
    minutes: int = 0
    _seconds: float = field(default=0.0, repr=False, compare=False)

    def update(self, dt: float) -> None:
        """Advance the display by ``dt`` seconds, rolling minutes into hours."""
        self._seconds += dt
        whole_minutes, self._seconds = divmod(self._seconds, _SECONDS_PER_MINUTE)
        total_minutes = self.minutes + int(whole_minutes)
        extra_hours, self.minutes = divmod(total_minutes, _MINUTES_PER_HOUR)
        self.hours += extra_hours