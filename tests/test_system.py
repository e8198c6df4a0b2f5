import pytest

from e170sim.system import HydraulicSystem, System, SystemContainer


class RecordingSystem(System):
    def __init__(self):
        self.steps = []

    def update(self, delta_time):
        self.steps.append(delta_time)


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()


def test_container_forwards_updates_in_order():
    recorder = RecordingSystem()
    container = SystemContainer(recorder)
    container.update(0.5)
    container.update(0.25)
    assert recorder.steps == [0.5, 0.25]


def test_container_holds_component():
    hydraulic = HydraulicSystem()
    container = SystemContainer(hydraulic)
    container.update(0.016)
    assert container.component is hydraulic


def test_subclass_without_update_cannot_be_contained():
    class Incomplete(System):
        pass

    with pytest.raises(TypeError):
        SystemContainer(Incomplete())