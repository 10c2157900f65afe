"""
Solution units: the contract, the registry, harnesses, discovery and rebuilds.
"""

from .contract import HarnessDescriptor, HasPart2, Operation, Solution, UnitDescriptor, supports
from .discovery import discover
from .harness import aoc_test, run_unit_doctests
from .rebuild import ModuleReloader, NullRebuilder, Rebuilder
from .units import UnitRegistry, aoc, default_registry

__all__ = [
    "HarnessDescriptor",
    "HasPart2",
    "ModuleReloader",
    "NullRebuilder",
    "Operation",
    "Rebuilder",
    "Solution",
    "UnitDescriptor",
    "UnitRegistry",
    "aoc",
    "aoc_test",
    "default_registry",
    "discover",
    "run_unit_doctests",
    "supports",
]
