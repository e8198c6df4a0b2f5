"""Electrical network: components joined by resistive wires, updated in topological order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque


class ElectricalComponent(ABC):
    """A node of the electrical network.

    Voltages are in volts, powers in watts, currents in amperes.
    """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the component's internal state by ``dt``."""

    @abstractmethod
    def apply_input(self, voltage: float, power: float, current: float) -> None:
        """Receive the voltage, power and current fed by an upstream component."""

    @property
    @abstractmethod
    def output_power(self) -> float:
        """Power delivered downstream."""

    @property
    @abstractmethod
    def output_voltage(self) -> float:
        """Voltage presented downstream."""

    @property
    def output_current(self) -> float:
        """Current delivered downstream, derived from power and voltage."""
        voltage = self.output_voltage
        if voltage > 0.0:
            return self.output_power / voltage
        return 0.0

    @property
    def input_current(self) -> float:
        """Current drawn from upstream; by default the same as the output current."""
        return self.output_current


class ElectricalSystem:
    """A directed graph of electrical components connected by wires."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._components: list[ElectricalComponent] = []
        self._successors: list[list[int]] = []
        self._edges: list[tuple[int, int]] = []
        self._node_voltage: dict[int, float] = {}
        self._edge_current: dict[tuple[int, int], float] = {}
        self._wire_resistance: dict[tuple[int, int], float] = {}

    def __len__(self) -> int:
        return len(self._components)

    def add_component(self, name: str, component: ElectricalComponent) -> int:
        """Add a component and return the node index that identifies it."""
        node = len(self._components)
        self._names.append(name)
        self._components.append(component)
        self._successors.append([])
        return node

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._components):
            raise KeyError(f"unknown node {node}")

    def component(self, node: int) -> ElectricalComponent:
        """Return the component stored at ``node``."""
        self._check_node(node)
        return self._components[node]

    def name(self, node: int) -> str:
        """Return the name given to ``node``."""
        self._check_node(node)
        return self._names[node]

    @property
    def edge_currents(self) -> dict[tuple[int, int], float]:
        """A copy of the current through every connection."""
        return dict(self._edge_current)

    def connect_with_wire(self, source: int, target: int, resistance: float) -> None:
        """Connect ``source`` to ``target`` through a wire of the given resistance in ohms."""
        self._check_node(source)
        self._check_node(target)
        self._edges.append((source, target))
        self._successors[source].append(target)
        self._edge_current[(source, target)] = 0.0
        self._wire_resistance[(source, target)] = float(resistance)

    def connect_no_resistance(self, source: int, target: int) -> None:
        """Connect two nodes with a nearly ideal wire (one milliohm)."""
        self.connect_with_wire(source, target, 0.001)

    def calculate_current_flow(self) -> None:
        """Recompute the current through every wire from the voltage difference across it."""
        for source, target in self._edges:
            voltage_diff = (
                self._components[source].output_voltage
                - self._components[target].output_voltage
            )
            resistance = self._wire_resistance.get((source, target))
            if resistance is None:
                continue
            current = voltage_diff / resistance if resistance > 0.0 else 0.0
            self._edge_current[(source, target)] = current

    def _topological_order(self) -> list[int] | None:
        indegree = [0] * len(self._components)
        for _, target in self._edges:
            indegree[target] += 1
        ready = deque(node for node, degree in enumerate(indegree) if degree == 0)
        order: list[int] = []
        while ready:
            node = ready.popleft()
            order.append(node)
            for neighbor in self._successors[node]:
                indegree[neighbor] -= 1
                if indegree[neighbor] == 0:
                    ready.append(neighbor)
        if len(order) != len(self._components):
            return None
        return order

    def update_system(self, dt: float) -> None:
        """Update every component, recompute currents and propagate outputs downstream.

        A network that contains a cycle is left untouched.
        """
        order = self._topological_order()
        if order is None:
            return

        for node in order:
            component = self._components[node]
            component.update(dt)
            self._node_voltage[node] = component.output_voltage

        self.calculate_current_flow()

        for node in order:
            component = self._components[node]
            voltage = component.output_voltage
            power = component.output_power
            for neighbor in self._successors[node]:
                self._components[neighbor].apply_input(
                    voltage, power, self._edge_current[(node, neighbor)]
                )

    def current(self, source: int, target: int) -> float | None:
        """Return the current through the wire from ``source`` to ``target``, if any."""
        return self._edge_current.get((source, target))

    def check_overcurrent(self, max_current: float) -> list[tuple[int, int, float]]:
        """List the connections whose current exceeds ``max_current``."""
        return [
            (source, target, current)
            for (source, target), current in self._edge_current.items()
            if current > max_current
        ]