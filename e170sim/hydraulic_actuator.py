"""A double-acting hydraulic actuator driven by a flow-control valve.

All quantities are in SI units: metres, pascals, cubic metres per second,
newtons, kilograms per cubic metre, pascal-seconds and seconds.
"""

from __future__ import annotations

import math
from typing import TypeVar

T = TypeVar("T", int, float)

_EFFECTIVE_MASS = 1.0  # kg


def circle_area(diameter: float) -> float:
    """Area of a circle of the given diameter."""
    radius = diameter / 2.0
    return math.pi * radius * radius


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range ``low``..``high``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that follows IEEE rules for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class HydraulicActuator:
    """A piston moved by fluid pressure against friction and an external load."""

    def __init__(
        self,
        bore_diameter: float,
        rod_diameter: float,
        stroke_length: float,
        fluid_bulk_modulus: float,
        fluid_density: float,
        fluid_viscosity: float,
        valve_max_flow_rate: float,
        static_friction: float,
        dynamic_friction_coefficient: float,
        internal_leakage_coefficient: float,
        external_leakage_coefficient: float,
    ) -> None:
        self.bore_diameter = float(bore_diameter)
        self.rod_diameter = float(rod_diameter)
        self.stroke_length = float(stroke_length)
        self.fluid_bulk_modulus = float(fluid_bulk_modulus)
        self.fluid_density = float(fluid_density)
        self.fluid_viscosity = float(fluid_viscosity)
        self.valve_max_flow_rate = float(valve_max_flow_rate)
        self.static_friction = float(static_friction)
        self.dynamic_friction_coefficient = float(dynamic_friction_coefficient)
        self.internal_leakage_coefficient = float(internal_leakage_coefficient)
        self.external_leakage_coefficient = float(external_leakage_coefficient)
        self.external_force = 0.0

        self._position = 0.0
        self._velocity = 0.0
        self._acceleration = 0.0
        self._valve_opening = 0.0
        self._cap_end_pressure = 0.0
        self._rod_end_pressure = 0.0
        self._cap_end_volume = self._cap_area * self._position
        self._rod_end_volume = self._rod_area * (self.stroke_length - self._position)

    @property
    def _cap_area(self) -> float:
        return circle_area(self.bore_diameter)

    @property
    def _rod_area(self) -> float:
        return circle_area(self.rod_diameter) - circle_area(self.rod_diameter)

    @property
    def valve_opening(self) -> float:
        """Valve opening as a fraction, kept within 0..1."""
        return self._valve_opening

    @valve_opening.setter
    def valve_opening(self, opening: float) -> None:
        self._valve_opening = clamp(float(opening), 0.0, 1.0)

    @property
    def position(self) -> float:
        return self._position

    @property
    def velocity(self) -> float:
        return self._velocity

    @property
    def acceleration(self) -> float:
        return self._acceleration

    @property
    def pressure(self) -> float:
        """Cap-end pressure."""
        return self._cap_end_pressure

    @property
    def rod_end_pressure(self) -> float:
        return self._rod_end_pressure

    @property
    def cap_end_volume(self) -> float:
        return self._cap_end_volume

    @property
    def rod_end_volume(self) -> float:
        return self._rod_end_volume

    @property
    def extension_ratio(self) -> float:
        """Position as a fraction of the full stroke."""
        return _divide(self._position, self.stroke_length)

    def set_supply_pressure(self, pressure: float) -> None:
        """Feed supply pressure to the cap end; ignored while the valve is closed."""
        if self._valve_opening > 0.0:
            self._cap_end_pressure = float(pressure)

    def update(self, delta_time: float) -> None:
        """Advance pressures, forces and motion by ``delta_time`` seconds."""
        cap_area = self._cap_area
        rod_area = self._rod_area

        max_flow = self.valve_max_flow_rate * self._valve_opening
        delta_p = self._cap_end_pressure - self._rod_end_pressure

        internal_leakage_flow = self.internal_leakage_coefficient * delta_p
        cap_external_leakage = self.external_leakage_coefficient * self._cap_end_pressure
        rod_external_leakage = self.external_leakage_coefficient * self._rod_end_pressure

        cap_end_flow = max_flow if self._valve_opening > 0.0 else 0.0
        rod_end_flow = -max_flow if self._valve_opening < 0.0 else 0.0

        net_cap_flow = cap_end_flow - internal_leakage_flow - cap_external_leakage
        net_rod_flow = rod_end_flow - internal_leakage_flow - rod_external_leakage

        cap_pressure_change = -(
            self.fluid_bulk_modulus
            * _divide(net_cap_flow * delta_time, self._cap_end_volume)
        )
        rod_pressure_change = -(
            self.fluid_bulk_modulus
            * _divide(net_rod_flow * delta_time, self._rod_end_volume)
        )

        self._cap_end_pressure += cap_pressure_change
        self._rod_end_pressure += rod_pressure_change

        hydraulic_force = (
            self._cap_end_pressure * cap_area - self._rod_end_pressure * rod_area
        )

        if abs(self._velocity) < 1e-6:
            friction_force = clamp(
                hydraulic_force + self.external_force,
                -self.static_friction,
                self.static_friction,
            )
        else:
            direction = 1.0 if self._velocity > 0.0 else -1.0
            friction_force = (
                direction * self.dynamic_friction_coefficient * abs(self._velocity)
            )

        net_force = hydraulic_force + self.external_force - friction_force

        self._acceleration = net_force / _EFFECTIVE_MASS
        self._velocity = self._velocity + self._acceleration * delta_time
        position_change = (
            self._velocity * delta_time
            + 0.5 * self._acceleration * delta_time * delta_time
        )
        self._position = clamp(
            self._position + position_change, 0.0, self.stroke_length
        )

        at_retracted_stop = self._position <= 0.0 and self._velocity < 0.0
        at_extended_stop = (
            self._position >= self.stroke_length and self._velocity > 0.0
        )
        if at_retracted_stop or at_extended_stop:
            self._velocity = 0.0
            self._acceleration = 0.0

        self._cap_end_volume = cap_area * self._position
        self._rod_end_volume = rod_area * (self.stroke_length - self._position)