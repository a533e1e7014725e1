"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.config import parse_settings
from philosophers.simulation import Simulation
from philosophers.validation import ArgumentError

USAGE = (
    "usage: philosophers number_of_philosophers time_to_die time_to_eat "
    "time_to_sleep [number_of_times_each_philosopher_must_eat]"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with the given arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        Simulation(settings, sys.stdout).run()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())