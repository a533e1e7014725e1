"""Simulation settings built from the command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosophers.validation import ArgumentError, validate_args


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers run; times are in milliseconds.

    ``meals`` is ``None`` when the run has no meal limit.
    """

    philo_num: int
    die_time: int
    eat_time: int
    sleep_time: int
    meals: int | None = None

    def __post_init__(self) -> None:
        if min(self.philo_num, self.die_time, self.eat_time, self.sleep_time) <= 0:
            raise ArgumentError("Error: All values must be positive")
        if self.meals is not None and self.meals <= 0:
            raise ArgumentError("Error: Number of meals must be positive")


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError("Error: Invalid number of arguments")
    values = validate_args(args)
    philo_num, die_time, eat_time, sleep_time = values[:4]
    meals = values[4] if len(values) == 5 else None
    return Settings(
        philo_num=philo_num,
        die_time=die_time,
        eat_time=eat_time,
        sleep_time=sleep_time,
        meals=meals,
    )