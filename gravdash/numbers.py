"""Non-negative decimal numbers kept as lists of digits."""

from __future__ import annotations

from typing import List


def _digits_value(digits: List[int]) -> int:
    return int("".join(str(int(d)) for d in digits)) if digits else 0


def zero(digits: List[int]) -> None:
    """Reset ``digits`` in place to the single digit 0."""
    digits[:] = [0]


def add_value(digits: List[int], value: int) -> None:
    """Add ``value`` to ``digits`` in place; results below zero clamp to 0."""
    if value == 0:
        return
    total = _digits_value(digits) + value
    if total <= 0:
        zero(digits)
        return
    digits[:] = [int(c) for c in str(total)]


class Number:
    """A non-negative integer stored as digits, most significant first."""

    def __init__(self, starting_value: int = 0) -> None:
        if starting_value < 0:
            raise ValueError("a Number cannot start below zero")
        self._digits: List[int] = [0]
        add_value(self._digits, starting_value)

    @property
    def digits(self) -> tuple:
        return tuple(self._digits)

    def add_value(self, value: int) -> None:
        """Add ``value``; subtracting past zero leaves 0."""
        add_value(self._digits, value)

    def zero(self) -> None:
        """Reset the number to 0."""
        zero(self._digits)

    def as_string(self) -> str:
        """Return the decimal representation."""
        return "".join(str(d) for d in self._digits)

    def __int__(self) -> int:
        return _digits_value(self._digits)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"Number({self.as_string()})"