import pytest

from e170sim.circuit_breaker import CircuitBreaker, TripCurve, TripCurveKind


def _breaker(curve, auto_reset=False, reset_delay=0.0):
    return CircuitBreaker("Avionics CB", 15.0, curve, auto_reset, reset_delay)


def test_trip_curve_constructors():
    assert TripCurve.instantaneous().kind is TripCurveKind.INSTANTANEOUS
    assert TripCurve.short_delay(0.2) == TripCurve(TripCurveKind.SHORT_DELAY, 0.2)
    assert TripCurve.long_delay(5.0).delay == 5.0
    assert TripCurve.inverse_time().kind is TripCurveKind.INVERSE_TIME


def test_closed_breaker_passes_inputs_through():
    breaker = _breaker(TripCurve.short_delay(0.2))
    breaker.apply_input(28.0, 120.0, 4.0)
    breaker.update(16.0)
    assert not breaker.is_tripped
    assert breaker.output_voltage == 28.0
    assert breaker.output_power == 120.0
    assert breaker.output_current == 4.0
    assert breaker.input_current == 4.0


def test_current_at_rating_does_not_trip():
    breaker = _breaker(TripCurve.instantaneous())
    breaker.apply_input(28.0, 420.0, 15.0)
    breaker.update(1000.0)
    assert not breaker.is_tripped
    assert breaker.overcurrent_time == 0.0


def test_instantaneous_trips_on_first_overcurrent_update():
    breaker = _breaker(TripCurve.instantaneous())
    breaker.apply_input(28.0, 500.0, 16.0)
    assert breaker.should_trip()
    breaker.update(1.0)
    assert breaker.is_tripped
    assert (breaker.output_voltage, breaker.output_power, breaker.output_current) == (0.0, 0.0, 0.0)


def test_short_delay_waits_for_delay():
    breaker = _breaker(TripCurve.short_delay(0.5))
    breaker.apply_input(28.0, 600.0, 20.0)
    breaker.update(250.0)
    assert not breaker.is_tripped
    assert breaker.overcurrent_time == pytest.approx(0.25)
    breaker.update(250.0)
    assert breaker.is_tripped


def test_overcurrent_timer_clears_when_current_drops():
    breaker = _breaker(TripCurve.long_delay(1.0))
    breaker.apply_input(28.0, 600.0, 20.0)
    breaker.update(500.0)
    assert breaker.overcurrent_time > 0.0
    breaker.apply_input(28.0, 100.0, 3.0)
    breaker.update(500.0)
    assert breaker.overcurrent_time == 0.0
    assert not breaker.is_tripped


def test_inverse_time_heavy_overload_trips_on_first_update():
    heavy = _breaker(TripCurve.inverse_time())
    heavy.apply_input(28.0, 0.0, 60.0)
    heavy.update(10.0)
    assert heavy.is_tripped


def test_inverse_time_mild_overload_takes_several_updates():
    mild = _breaker(TripCurve.inverse_time())
    mild.apply_input(28.0, 0.0, 20.0)
    tripped_after = []
    for _ in range(6):
        mild.update(10.0)
        tripped_after.append(mild.is_tripped)
    assert tripped_after == [False, False, False, False, False, True]


def test_manual_reset_clears_trip():
    breaker = _breaker(TripCurve.instantaneous())
    breaker.apply_input(28.0, 500.0, 30.0)
    breaker.update(1.0)
    assert breaker.is_tripped
    breaker.reset()
    assert not breaker.is_tripped
    assert breaker.trip_time == 0.0
    assert breaker.overcurrent_time == 0.0
    assert breaker.output_voltage == 28.0


def test_without_auto_reset_breaker_stays_tripped():
    breaker = _breaker(TripCurve.instantaneous(), auto_reset=False, reset_delay=0.0)
    breaker.apply_input(28.0, 500.0, 30.0)
    breaker.update(1.0)
    breaker.apply_input(28.0, 0.0, 0.0)
    for _ in range(10):
        breaker.update(1000.0)
    assert breaker.is_tripped
    assert breaker.trip_time == 0.0


def test_auto_reset_after_delay():
    breaker = _breaker(TripCurve.instantaneous(), auto_reset=True, reset_delay=5.0)
    breaker.apply_input(28.0, 500.0, 30.0)
    breaker.update(1.0)
    assert breaker.is_tripped
    breaker.apply_input(28.0, 100.0, 2.0)
    breaker.update(2500.0)
    assert breaker.is_tripped
    assert breaker.trip_time == pytest.approx(2.5)
    breaker.update(2500.0)
    assert not breaker.is_tripped
    assert breaker.output_current == 2.0