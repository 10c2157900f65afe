"""
The two-part solution contract and the descriptors recorded for each registered unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from aocutils.foundation.keys import PuzzleKey


@runtime_checkable
class Solution(Protocol):
    """Every unit solves part 1 from the raw puzzle text."""

    def part1(self, raw_input: str) -> Any: ...


@runtime_checkable
class HasPart2(Protocol):
    """Optional capability: day 25 conventionally has no second part."""

    def part2(self, raw_input: str) -> Any: ...


class Operation(str, Enum):
    PART1 = "part1"
    PART2 = "part2"


def supports(implementation: Any, operation: Operation) -> bool:
    if operation is Operation.PART1:
        return isinstance(implementation, Solution) and callable(implementation.part1)
    return isinstance(implementation, HasPart2) and callable(implementation.part2)


@dataclass(frozen=True)
class UnitDescriptor:
    key: PuzzleKey
    name: str
    implementation: Any
    has_part2: bool
    module: str | None = None


@dataclass(frozen=True)
class HarnessDescriptor:
    key: PuzzleKey
    name: str
    test_class: type
    unit_imported: bool
    doctest_enabled: bool
    module: str | None = None


__all__ = [
    "Solution",
    "HasPart2",
    "Operation",
    "supports",
    "UnitDescriptor",
    "HarnessDescriptor",
]
