"""The common interface of aircraft systems and a holder that drives one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


class System(ABC):
    """Anything that advances its state once per simulation tick."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the system by ``delta_time``."""


S = TypeVar("S", bound=System)


class SystemContainer(Generic[S]):
    """Owns a system and forwards updates to it."""

    def __init__(self, component: S) -> None:
        self.component = component

    def update(self, delta_time: float) -> None:
        self.component.update(delta_time)


class HydraulicSystem(System):
    """The aircraft hydraulic system; it holds no state yet."""

    def update(self, delta_time: float) -> None:
        """The hydraulic system has no dynamics yet."""