"""
Discovery pass over a package of solution modules.

Importing a module is enough for ``@aoc`` units to register themselves. Modules that follow the
naming convention and define a module-level ``part1`` (for example ``solutions/y2020/d01.py`` or
``solutions/y2020_d01.py``) are registered with the module itself as the unit.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import re
from types import ModuleType

from aocutils.foundation.keys import PuzzleKey

from .contract import Operation, supports
from .units import UnitRegistry, default_registry

logger = logging.getLogger(__name__)

CONVENTION = re.compile(r"(?:^|[._])y(?P<year>\d{4})[._]d(?P<day>\d{1,2})$", re.IGNORECASE)


def convention_key(module_name: str) -> PuzzleKey | None:
    """
    Puzzle key encoded in a module name, if any.

    >>> convention_key("solutions.y2020.d01")
    PuzzleKey(year=2020, day=1)
    >>> convention_key("solutions.y2020_d25")
    PuzzleKey(year=2020, day=25)
    >>> convention_key("solutions.helpers") is None
    True
    """
    match = CONVENTION.search(module_name)
    if match is None:
        return None
    return PuzzleKey(int(match.group("year")), int(match.group("day")))


def _reraise(name: str) -> None:
    raise


def iter_package_modules(package: str) -> list[ModuleType]:
    """Import *package* and all of its submodules, parents first."""
    root = importlib.import_module(package)
    modules = [root]
    if hasattr(root, "__path__"):
        for info in pkgutil.walk_packages(root.__path__, prefix=f"{root.__name__}.", onerror=_reraise):
            modules.append(importlib.import_module(info.name))
    return modules


def register_by_convention(module: ModuleType, registry: UnitRegistry) -> PuzzleKey | None:
    key = convention_key(module.__name__)
    if key is None or registry.units_from(module.__name__):
        return None
    if not supports(module, Operation.PART1):
        return None
    registry.generate(key.year, key.day, module)
    logger.debug("Registered %s by naming convention", module.__name__)
    return key


def discover(package: str, registry: UnitRegistry | None = None) -> list[PuzzleKey]:
    """Import every module of *package* and return the keys of the units it defines."""
    target = registry if registry is not None else default_registry()
    keys: set[PuzzleKey] = set()
    for module in iter_package_modules(package):
        register_by_convention(module, target)
        keys.update(unit.key for unit in target.units_from(module.__name__))
    logger.debug("Discovered %d unit(s) in %s", len(keys), package)
    return sorted(keys)


__all__ = ["CONVENTION", "convention_key", "discover", "iter_package_modules", "register_by_convention"]
