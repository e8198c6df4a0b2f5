"""A mechanically driven AC generator."""

from __future__ import annotations

import logging

from e170sim.electrical import ElectricalComponent

logger = logging.getLogger(__name__)


class Generator(ElectricalComponent):
    """Converts mechanical input power into electrical output power.

    ``update`` takes its time step in milliseconds; ``spin_up_time`` is in milliseconds.
    """

    def __init__(
        self,
        num_poles: float,
        rated_power: float,
        rated_voltage: float,
        rated_frequency: float,
        efficiency: float,
        internal_resistance: float,
        spin_up_time: float,
        phase_count: int,
    ) -> None:
        self.num_poles = float(num_poles)
        self.rated_power = float(rated_power)
        self.rated_voltage = float(rated_voltage)
        self.rated_frequency = float(rated_frequency)
        self._efficiency = efficiency * 100.0
        self.internal_resistance = float(internal_resistance)
        self.spin_up_time = float(spin_up_time)
        self.phase_count = int(phase_count)
        self._mechanical_input_power = 0.0
        self._rpm = rated_frequency * 60.0 / num_poles
        self._output_power = 0.0
        self._output_voltage = 0.0
        self._current_rpm = 0.0
        self._is_on = False
        self._time_on = 0.0

    @property
    def is_on(self) -> bool:
        return self._is_on

    @property
    def rpm(self) -> float:
        """Target shaft speed in revolutions per minute."""
        return self._rpm

    @property
    def current_rpm(self) -> float:
        """Present shaft speed, ramping towards ``rpm`` during spin-up."""
        return self._current_rpm

    @property
    def time_on(self) -> float:
        """Milliseconds since the generator was turned on."""
        return self._time_on

    @property
    def mechanical_input_power(self) -> float:
        return self._mechanical_input_power

    def set_mechanical_input(self, power: float, rpm: float) -> None:
        """Set the shaft power and speed; ignored while the generator is off."""
        if self._is_on:
            self._mechanical_input_power = float(power)
            self._rpm = float(rpm)

    def turn_on(self) -> None:
        self._is_on = True
        self._time_on = 0.0

    def turn_off(self) -> None:
        self._is_on = False
        self._output_voltage = 0.0
        self._output_power = 0.0
        self._current_rpm = 0.0

    def update(self, dt: float) -> None:
        if not self._is_on:
            self._output_power = 0.0
            self._output_voltage = 0.0
            self._current_rpm = 0.0
            return

        logger.debug("Generator is on")
        self._time_on += dt

        if self.spin_up_time > 0.0:
            spin_progress = min(self._time_on / self.spin_up_time * 1000.0, 1.0)
        else:
            spin_progress = 1.0

        self._current_rpm = self._rpm * spin_progress

        expected_rpm = self.rated_frequency * 60.0 / self.num_poles
        if self._current_rpm >= expected_rpm:
            efficiency_factor = self._efficiency
        else:
            efficiency_factor = self._efficiency * (self._rpm / expected_rpm)

        available_power = self._mechanical_input_power * efficiency_factor
        self._output_power = min(available_power, self.rated_power)

        current = self._output_power / self.rated_voltage * self.phase_count
        voltage_drop = current * self.internal_resistance
        self._output_voltage = max(self.rated_voltage - voltage_drop, 0.0)

    def apply_input(self, voltage: float, power: float, current: float) -> None:
        """A generator takes no electrical input."""

    @property
    def output_power(self) -> float:
        return self._output_power

    @property
    def output_voltage(self) -> float:
        return self._output_voltage