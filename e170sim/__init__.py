"""Regional jet systems simulation: electrical network, hydraulic actuator, instruments and a message bus."""

__version__ = "0.1.0"