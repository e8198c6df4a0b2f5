# e170sim

A simulation of the systems of a regional jet, advanced one tick at a time.

Nothing outside the standard library is required.

## What it models

- **Electrical network** (`e170sim.electrical.ElectricalSystem`): a directed
  graph of components joined by resistive wires. `update_system(dt)` updates
  every component in topological order, then computes the current through
  each wire from the voltage difference across it and the wire's resistance.
  It then feeds each component's output voltage, power and wire current to
  the components downstream. A network that contains a cycle is left
  untouched. `check_overcurrent(max_current)` lists the connections carrying
  more than a given current.
- **Components**, all subclasses of `ElectricalComponent`:
  - `e170sim.generator.Generator`: an AC generator driven by mechanical input
    power. It must be switched on with `turn_on()`. Calls to
    `set_mechanical_input(power, rpm)` are ignored while it is off.
  - `e170sim.bus.Bus`: a lossless bus that passes on whatever it is fed.
  - `e170sim.circuit_breaker.CircuitBreaker`: opens when the current through it
    exceeds its rating for long enough. The delay is set by a `TripCurve`:
    `instantaneous()`, `short_delay(s)`, `long_delay(s)` or `inverse_time()`.
    A breaker made with `auto_reset=True` closes again after `reset_delay`
    seconds.
  - `e170sim.dc_component.GenericDcComponent`: a DC load such as a display or
    a light. Its `actual_power` depends on the supply voltage, according to a
    `VoltageResponse`: `LINEAR`, `BINARY`, `REGULATED` or `PROPORTIONAL`.
    While switched on, it logs overvoltage, undervoltage and its consumption.
- **Hydraulics**: `e170sim.hydraulic_actuator.HydraulicActuator` is a piston
  moved by a valve-controlled flow. It models chamber pressures, internal and
  external leakage, static and dynamic friction, an external load and end
  stops. All its quantities are in SI units.
- **Instruments**:
  - `e170sim.clock.Clock` has `UTC`, `ET` and `CHR` modes (`ClockMode`).
    `update(dt)` adds the whole part of `dt`.
  - `e170sim.chronometer.Chronometer` counts hours and minutes. `update(dt)`
    advances it by `dt` seconds.
- **Message bus**: `e170sim.communication_bus.CommunicationBus.instance()`
  returns a shared, thread-safe store. Use `send(message_id, message)` to file
  a message and `receive(message_id, message_type)` to get copies of the
  messages of that exact type.
- **Systems interface**: `e170sim.system.System` is the interface for anything
  updated once per tick. `SystemContainer` forwards updates to the system it
  holds.

`e170sim.aircraft.E170Systems` puts a sample network together. A generator
feeds a main bus, which supplies a display and a light through two circuit
breakers. The generator is switched on once the accumulated `dt` passes 3.0.
Each call to `update(dt)` returns the connections carrying more than 20 A and
logs them as warnings.

Time units: `Generator.update` and `CircuitBreaker.update` take their time
step in milliseconds. `E170Systems.update` passes its `dt` unchanged to every
component.

## Running the simulation

```
e170sim
```

This steps `E170Systems` in a loop. Each step is given the wall-clock time
since the previous one, measured by `e170sim.delta_time.DeltaTime`. It runs
until interrupted with Ctrl-C. Messages go through `logging`.

Options:

- `--ticks N`: stop after N ticks (default: run forever)
- `--interval SECONDS`: pause between ticks (default: 0.016)
- `--log-level {DEBUG,INFO,WARNING,ERROR}`: logging verbosity (default: INFO)

The same loop is available as `e170sim.cli.run(max_ticks=None, interval=0.016)`.
It returns the `E170Systems` instance when it stops.

## Using it as a library

```python
from e170sim.aircraft import E170Systems

aircraft = E170Systems()
for _ in range(300):
    overcurrents = aircraft.update(0.016)
```

Building a network of your own:

```python
from e170sim.bus import Bus
from e170sim.electrical import ElectricalSystem
from e170sim.generator import Generator

system = ElectricalSystem()
gen = system.add_component("Generator", Generator(2.0, 90000.0, 115.0, 400.0, 0.95, 0.05, 0.0, 3))
bus = system.add_component("Bus", Bus())
system.connect_no_resistance(gen, bus)

system.component(gen).turn_on()
system.update_system(16.0)
print(system.current(gen, bus))
print(system.check_overcurrent(20.0))
```

## What it does not do

- There is no graphical interface. The simulation runs only from the command
  line or as a library.
- It does not read from or write to an external flight simulator. The clock
  and chronometer count only the time they are given.
- `HydraulicSystem` holds no state and its `update` does nothing. The
  `HydraulicActuator` is a standalone component and is not part of
  `E170Systems`.
- Fuel, engine, bleed air, APU and pressurization are not modelled.

## Running the tests

```
pip install .[test]
pytest
```