"""Command-line entry point that runs the simulation loop."""

from __future__ import annotations

import argparse
import itertools
import logging
import time
from collections.abc import Sequence

from e170sim.aircraft import E170Systems
from e170sim.delta_time import DeltaTime

DEFAULT_INTERVAL = 0.016


def run(max_ticks: int | None = None, interval: float = DEFAULT_INTERVAL) -> E170Systems:
    """Step the aircraft systems, sleeping ``interval`` seconds between ticks.

    Runs forever when ``max_ticks`` is None; returns the systems when it stops.
    """
    if max_ticks is not None and max_ticks < 0:
        raise ValueError("max_ticks must not be negative")
    if interval < 0:
        raise ValueError("interval must not be negative")

    delta_time = DeltaTime()
    systems = E170Systems()
    ticks = itertools.count() if max_ticks is None else range(max_ticks)
    for _ in ticks:
        systems.update(delta_time.update_time())
        time.sleep(interval)
    return systems


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="e170sim", description="Run the E-170 systems simulation."
    )
    parser.add_argument(
        "--ticks",
        type=_non_negative_int,
        default=None,
        help="stop after this many ticks (default: run forever)",
    )
    parser.add_argument(
        "--interval",
        type=_non_negative_float,
        default=DEFAULT_INTERVAL,
        help="seconds to sleep between ticks",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")
    try:
        run(args.ticks, args.interval)
    except KeyboardInterrupt:
        pass
    return 0