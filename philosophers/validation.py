"""Validation of the numeric command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the simulation arguments are unusable."""


def validate_arg(text: str) -> int:
    """Check that *text* is a plain decimal number in 1..INT_MAX and return it."""
    if text is None or not text or not set(text) <= _DIGITS:
        if text == "":
            raise ArgumentError("Error: Empty argument")
        raise ArgumentError("Error: Arguments must be positive numbers")
    value = int(text)
    if not 0 < value <= INT_MAX:
        raise ArgumentError("Error: Argument out of valid integer range")
    return value


def validate_args(args: Iterable[str]) -> list[int]:
    """Validate every argument in order, stopping at the first bad one."""
    return [validate_arg(arg) for arg in args]