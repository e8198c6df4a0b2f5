"""The aircraft as a whole: builds its systems and steps them each tick."""

from __future__ import annotations

import logging

from e170sim.bus import Bus
from e170sim.circuit_breaker import CircuitBreaker, TripCurve
from e170sim.dc_component import GenericDcComponent, VoltageResponse
from e170sim.electrical import ElectricalSystem
from e170sim.generator import Generator

logger = logging.getLogger(__name__)

_GENERATOR_START_TIME = 3.0
_OVERCURRENT_LIMIT = 20.0


class E170Systems:
    """All aircraft systems; state persists between ticks."""

    def __init__(self) -> None:
        system = ElectricalSystem()

        generator = Generator(2.0, 90000.0, 115.0, 400.0, 0.95, 0.05, 0.0, 3)
        self.generator_node = system.add_component("Main Generator", generator)

        main_bus = system.add_component("Main Bus", Bus(voltage=28.0, power=0.0))
        system.connect_no_resistance(self.generator_node, main_bus)

        avionics_cb = system.add_component(
            "Avionics CB",
            CircuitBreaker("Avionics CB", 15.0, TripCurve.short_delay(0.2), False, 0.0),
        )
        lights_cb = system.add_component(
            "Lights CB",
            CircuitBreaker("Lights CB", 10.0, TripCurve.short_delay(0.1), True, 5.0),
        )
        system.connect_no_resistance(main_bus, avionics_cb)
        system.connect_no_resistance(main_bus, lights_cb)

        display = system.add_component(
            "Test Display",
            GenericDcComponent(
                "Test Display", 28.0, 120.0, 21.0, 32.0, VoltageResponse.REGULATED, 0.85
            ),
        )
        light = system.add_component(
            "Test Light",
            GenericDcComponent(
                "Test Light", 28.0, 200.0, 20.0, 32.0, VoltageResponse.BINARY, 0.9
            ),
        )
        system.connect_with_wire(avionics_cb, display, 0.01)
        system.connect_with_wire(lights_cb, light, 0.02)

        self.electrical_system = system
        self.elapsed_time = 0.0
        self.generator_on = False

    @property
    def generator(self) -> Generator:
        component = self.electrical_system.component(self.generator_node)
        assert isinstance(component, Generator)
        return component

    def update(self, dt: float) -> list[tuple[int, int, float]]:
        """Advance every system by ``dt`` and return the connections in overcurrent."""
        self.elapsed_time += dt
        if not self.generator_on and self.elapsed_time > _GENERATOR_START_TIME:
            component = self.electrical_system.component(self.generator_node)
            if isinstance(component, Generator):
                component.turn_on()
                component.set_mechanical_input(80000.0, 6000.0)
                logger.info(
                    "Generator turned ON after %s seconds", self.elapsed_time / 1000.0
                )
                self.generator_on = True

        self.electrical_system.update_system(dt)

        overcurrents = self.electrical_system.check_overcurrent(_OVERCURRENT_LIMIT)
        if overcurrents:
            logger.warning("OVERCURRENT DETECTED in %d connections:", len(overcurrents))
            for source, target, current in overcurrents:
                logger.warning(
                    "  - %s -> %s: %.2f A (EXCESSIVE!)",
                    self.electrical_system.name(source),
                    self.electrical_system.name(target),
                    current,
                )
        return overcurrents