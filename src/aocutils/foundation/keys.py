"""
Puzzle keys and the naming convention that binds them to units.
"""

from __future__ import annotations

from dataclasses import dataclass

HARNESS_SUFFIX = "Harness"


@dataclass(frozen=True, order=True)
class PuzzleKey:
    """A ``(year, day)`` pair identifying one puzzle. Day is expected in 1..25 but not checked."""

    year: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}/{self.day}"

    @property
    def unit_name(self) -> str:
        return unit_name(self.year, self.day)

    @property
    def harness_name(self) -> str:
        return harness_name(self.year, self.day)


def unit_name(year: int, day: int) -> str:
    """
    Name of the solution unit for a puzzle.

    >>> unit_name(2020, 1)
    'Y2020.D1'
    >>> unit_name(2020, 11) != unit_name(2021, 1)
    True
    """
    return f"Y{year}.D{day}"


def harness_name(year: int, day: int) -> str:
    """
    Name of the test harness paired with a unit; never equal to any unit name.

    >>> harness_name(2020, 1)
    'Y2020.D1.Harness'
    """
    return f"{unit_name(year, day)}.{HARNESS_SUFFIX}"


__all__ = ["PuzzleKey", "unit_name", "harness_name", "HARNESS_SUFFIX"]
