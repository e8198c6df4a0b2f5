import math

import pytest

from e170sim.hydraulic_actuator import HydraulicActuator, circle_area, clamp


def make_actuator():
    return HydraulicActuator(
        bore_diameter=0.05,
        rod_diameter=0.02,
        stroke_length=0.3,
        fluid_bulk_modulus=1.5e9,
        fluid_density=850.0,
        fluid_viscosity=0.03,
        valve_max_flow_rate=0.001,
        static_friction=100.0,
        dynamic_friction_coefficient=50.0,
        internal_leakage_coefficient=1e-12,
        external_leakage_coefficient=1e-13,
    )


def test_circle_area_of_unit_radius_is_pi():
    assert circle_area(2.0) == pytest.approx(math.pi)


def test_circle_area_scales_with_square_of_diameter():
    assert circle_area(0.2) == pytest.approx(4 * circle_area(0.1))


@pytest.mark.parametrize(
    "value, expected", [(-5, 0), (5, 5), (15, 10), (0, 0), (10, 10)]
)
def test_clamp(value, expected):
    assert clamp(value, 0, 10) == expected


def test_initial_state_is_retracted_and_unpressurised():
    actuator = make_actuator()
    assert actuator.position == 0.0
    assert actuator.velocity == 0.0
    assert actuator.pressure == 0.0
    assert actuator.extension_ratio == 0.0
    assert actuator.cap_end_volume == 0.0
    assert actuator.rod_end_volume == 0.0


def test_valve_opening_is_clamped():
    actuator = make_actuator()
    actuator.valve_opening = 1.5
    assert actuator.valve_opening == 1.0
    actuator.valve_opening = -0.2
    assert actuator.valve_opening == 0.0
    actuator.valve_opening = 0.4
    assert actuator.valve_opening == 0.4


def test_supply_pressure_ignored_with_closed_valve():
    actuator = make_actuator()
    actuator.set_supply_pressure(2.0e7)
    assert actuator.pressure == 0.0


def test_supply_pressure_applied_with_open_valve():
    actuator = make_actuator()
    actuator.valve_opening = 0.5
    actuator.set_supply_pressure(2.0e7)
    assert actuator.pressure == 2.0e7


def test_external_force_is_stored():
    actuator = make_actuator()
    actuator.external_force = 250.0
    assert actuator.external_force == 250.0