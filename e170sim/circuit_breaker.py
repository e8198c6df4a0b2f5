"""Circuit breakers with configurable trip curves and optional auto-reset."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from e170sim.electrical import ElectricalComponent


class TripCurveKind(enum.Enum):
    """How a breaker responds to overcurrent."""

    INSTANTANEOUS = "instantaneous"
    SHORT_DELAY = "short_delay"
    LONG_DELAY = "long_delay"
    INVERSE_TIME = "inverse_time"


@dataclass(frozen=True)
class TripCurve:
    """A trip curve; ``delay`` (seconds) applies to the delayed kinds only."""

    kind: TripCurveKind
    delay: float = 0.0

    @classmethod
    def instantaneous(cls) -> TripCurve:
        return cls(TripCurveKind.INSTANTANEOUS)

    @classmethod
    def short_delay(cls, delay: float) -> TripCurve:
        return cls(TripCurveKind.SHORT_DELAY, delay)

    @classmethod
    def long_delay(cls, delay: float) -> TripCurve:
        return cls(TripCurveKind.LONG_DELAY, delay)

    @classmethod
    def inverse_time(cls) -> TripCurve:
        return cls(TripCurveKind.INVERSE_TIME)


class CircuitBreaker(ElectricalComponent):
    """Opens the circuit when the current through it exceeds its rating for long enough.

    ``update`` takes its time step in milliseconds; delays are in seconds.
    """

    def __init__(
        self,
        name: str,
        rating_amps: float,
        trip_curve: TripCurve,
        auto_reset: bool,
        reset_delay: float,
    ) -> None:
        self.name = name
        self.rating = float(rating_amps)
        self.trip_curve = trip_curve
        self.auto_reset = auto_reset
        self.reset_delay = float(reset_delay)
        self._is_tripped = False
        self._input_voltage = 0.0
        self._input_power = 0.0
        self._input_current = 0.0
        self._overcurrent_time = 0.0
        self._trip_time = 0.0

    @property
    def is_tripped(self) -> bool:
        return self._is_tripped

    @property
    def overcurrent_time(self) -> float:
        """Seconds spent continuously above the rating."""
        return self._overcurrent_time

    @property
    def trip_time(self) -> float:
        """Seconds spent in the tripped state."""
        return self._trip_time

    def reset(self) -> None:
        """Close the breaker and clear its timers."""
        self._is_tripped = False
        self._trip_time = 0.0
        self._overcurrent_time = 0.0

    def should_trip(self) -> bool:
        """Whether the present overcurrent has lasted long enough to trip."""
        if self._input_current <= self.rating:
            return False
        kind = self.trip_curve.kind
        if kind is TripCurveKind.INSTANTANEOUS:
            return True
        if kind in (TripCurveKind.SHORT_DELAY, TripCurveKind.LONG_DELAY):
            return self._overcurrent_time >= self.trip_curve.delay
        overload_ratio = self._input_current / self.rating
        return self._overcurrent_time >= 0.1 / (overload_ratio * overload_ratio)

    def update(self, dt: float) -> None:
        dt_seconds = dt / 1000.0

        if self._is_tripped:
            if self.auto_reset:
                self._trip_time += dt_seconds
                if self._trip_time >= self.reset_delay:
                    self.reset()
            return

        if self._input_current > self.rating:
            self._overcurrent_time += dt_seconds
        else:
            self._overcurrent_time = 0.0

        if self.should_trip():
            self._is_tripped = True
            self._trip_time = 0.0

    def apply_input(self, voltage: float, power: float, current: float) -> None:
        self._input_voltage = voltage
        self._input_power = power
        self._input_current = current

    @property
    def output_power(self) -> float:
        return 0.0 if self._is_tripped else self._input_power

    @property
    def output_voltage(self) -> float:
        return 0.0 if self._is_tripped else self._input_voltage

    @property
    def output_current(self) -> float:
        return 0.0 if self._is_tripped else self._input_current