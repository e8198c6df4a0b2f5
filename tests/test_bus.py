import pytest

from e170sim.bus import Bus


def test_outputs_mirror_stored_values():
    bus = Bus(voltage=28.0, power=0.0)
    assert bus.output_voltage == 28.0
    assert bus.output_power == 0.0


def test_apply_input_replaces_voltage_and_power():
    bus = Bus(voltage=28.0, power=0.0)
    bus.apply_input(115.0, 90000.0, 12.0)
    assert bus.output_voltage == 115.0
    assert bus.output_power == 90000.0


def test_update_does_not_change_state():
    bus = Bus(voltage=28.0, power=300.0)
    bus.update(0.016)
    assert (bus.output_voltage, bus.output_power) == (28.0, 300.0)


def test_output_current_derived_from_power_and_voltage():
    bus = Bus(voltage=28.0, power=280.0)
    assert bus.output_current == pytest.approx(10.0)
    assert bus.input_current == bus.output_current


def test_zero_voltage_gives_zero_current():
    bus = Bus(voltage=0.0, power=280.0)
    assert bus.output_current == 0.0


def test_defaults_are_dead_bus():
    bus = Bus()
    assert (bus.output_voltage, bus.output_power, bus.output_current) == (0.0, 0.0, 0.0)