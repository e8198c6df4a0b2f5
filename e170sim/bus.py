"""A distribution bus that passes voltage and power straight through."""

from __future__ import annotations

from dataclasses import dataclass

from e170sim.electrical import ElectricalComponent


@dataclass
class Bus(ElectricalComponent):
    """A lossless bus: whatever it is fed, it distributes."""

    voltage: float = 0.0
    power: float = 0.0

    def update(self, dt: float) -> None:
        """A bus has no internal dynamics."""

    def apply_input(self, voltage: float, power: float, current: float) -> None:
        self.voltage = voltage
        self.power = power

    @property
    def output_power(self) -> float:
        return self.power

    @property
    def output_voltage(self) -> float:
        return self.voltage