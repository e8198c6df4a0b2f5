"""A generic DC load whose power draw depends on the supplied voltage."""

from __future__ import annotations

import enum
import logging
import math

from e170sim.electrical import ElectricalComponent

logger = logging.getLogger(__name__)


class VoltageResponse(enum.Enum):
    """How a load's power consumption reacts to its supply voltage."""

    LINEAR = "linear"
    BINARY = "binary"
    REGULATED = "regulated"
    PROPORTIONAL = "proportional"


def _clamp_unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


class GenericDcComponent(ElectricalComponent):
    """A DC consumer such as a display or a light.

    It draws power from upstream and delivers nothing downstream.
    """

    def __init__(
        self,
        name: str,
        nominal_voltage: float,
        nominal_power: float,
        min_voltage: float,
        max_voltage: float,
        voltage_response: VoltageResponse,
        power_factor: float,
    ) -> None:
        self.name = name
        self.nominal_voltage = float(nominal_voltage)
        self.nominal_power = float(nominal_power)
        if nominal_power > 0.0 and nominal_voltage > 0.0:
            self.resistance = (nominal_voltage * nominal_voltage) / nominal_power
        else:
            self.resistance = math.inf
        self.min_voltage = float(min_voltage)
        self.max_voltage = float(max_voltage)
        self.voltage_response = voltage_response
        self.power_factor = _clamp_unit(power_factor)

        self.input_voltage = 0.0
        self.input_power = 0.0
        self.supplied_current = 0.0

        self.is_on = False
        self._load_factor = 1.0

    @property
    def load_factor(self) -> float:
        """Fraction of nominal load in use, kept within 0..1."""
        return self._load_factor

    @load_factor.setter
    def load_factor(self, factor: float) -> None:
        self._load_factor = _clamp_unit(factor)

    @property
    def actual_power(self) -> float:
        """Power consumed at the present input voltage, in watts."""
        voltage = self.input_voltage
        if not self.is_on or voltage < self.min_voltage:
            return 0.0
        base = self.nominal_power * self._load_factor * self.power_factor
        response = self.voltage_response
        if response is VoltageResponse.BINARY or response is VoltageResponse.REGULATED:
            return base
        if response is VoltageResponse.LINEAR:
            return base * (voltage / self.nominal_voltage)
        voltage_factor = min(
            (voltage - self.min_voltage) / (self.nominal_voltage - self.min_voltage), 1.0
        )
        return base * voltage_factor

    def update(self, dt: float) -> None:
        """Report voltage faults and consumption while the load is switched on."""
        if not self.is_on:
            return
        if self.input_voltage > self.max_voltage:
            logger.warning(
                "OVERVOLTAGE: %sV > %sV max for %s",
                self.input_voltage,
                self.max_voltage,
                self.name,
            )
        elif self.input_voltage < self.min_voltage:
            logger.warning(
                "UNDERVOLTAGE: %sV < %sV min for %s",
                self.input_voltage,
                self.min_voltage,
                self.name,
            )
        logger.info(
            "%s consuming %.1fW at %.1fV", self.name, self.actual_power, self.input_voltage
        )

    def apply_input(self, voltage: float, power: float, current: float) -> None:
        self.input_voltage = voltage
        self.input_power = power
        self.supplied_current = current

    @property
    def output_power(self) -> float:
        return 0.0

    @property
    def output_voltage(self) -> float:
        return 0.0

    @property
    def output_current(self) -> float:
        return 0.0

    @property
    def input_current(self) -> float:
        """Current drawn at the present input voltage."""
        if self.input_voltage > 0.0:
            return self.actual_power / self.input_voltage
        return 0.0