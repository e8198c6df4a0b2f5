import pytest

from e170sim.delta_time import DeltaTime


def fake_clock(readings):
    values = iter(readings)
    return lambda: next(values)


def test_first_delta_measured_from_creation():
    timer = DeltaTime(fake_clock([10.0, 10.5]))
    assert timer.update_time() == pytest.approx(0.5)


def test_each_delta_restarts_timer():
    timer = DeltaTime(fake_clock([1.0, 1.25, 2.0, 2.0]))
    assert timer.update_time() == pytest.approx(0.25)
    assert timer.update_time() == pytest.approx(0.75)
    assert timer.update_time() == 0.0


def test_real_clock_never_negative():
    timer = DeltaTime()
    deltas = [timer.update_time() for _ in range(5)]
    assert all(delta >= 0.0 for delta in deltas)