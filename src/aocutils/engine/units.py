"""
Unit registry: binds each puzzle key to the object that solves it.

Units are registered once, at import or discovery time, and only looked up afterwards. The
usual way to register one is the ``aoc`` decorator::

    from aocutils import aoc

    @aoc(2020, 1)
    class Solution:
        def part1(self, raw_input):
            ...

        def part2(self, raw_input):
            ...

which records the unit ``Y2020.D1`` in the process-wide registry.

Registering a second unit for the same key is rejected with ``DuplicateUnitError``. To replace
a unit (as reloading does), discard the old one first.
"""

from __future__ import annotations

import inspect
import logging
from types import ModuleType
from typing import Any, Callable, TypeVar

from aocutils.foundation.exceptions import DuplicateUnitError, InvalidUnitError, RegistryError, UnitNotFoundError
from aocutils.foundation.keys import PuzzleKey, harness_name, unit_name
from aocutils.foundation.registry import Registry

from .contract import HarnessDescriptor, Operation, UnitDescriptor, supports

logger = logging.getLogger(__name__)

B = TypeVar("B")


def _duplicate_unit(key: PuzzleKey, existing: UnitDescriptor, new: UnitDescriptor) -> Exception:
    return DuplicateUnitError(key.year, key.day, existing.module, new.module)


def _duplicate_name(name: str, existing: object, new: object) -> Exception:
    return RegistryError(f"The name '{name}' is already taken by another generated unit or harness.")


def _module_of(body: Any) -> str | None:
    if isinstance(body, ModuleType):
        return body.__name__
    return getattr(body, "__module__", None)


class UnitRegistry:
    """Keyed store of solution units and their test harnesses."""

    def __init__(self, name: str = "units") -> None:
        self._units: Registry[PuzzleKey, UnitDescriptor] = Registry(name, on_duplicate=_duplicate_unit)
        self._harnesses: Registry[PuzzleKey, HarnessDescriptor] = Registry(f"{name}.harnesses")
        self._names: Registry[str, PuzzleKey] = Registry(f"{name}.names", on_duplicate=_duplicate_name)

    # --- generation ---
    def generate(self, year: int, day: int, body: Any, *, module: str | None = None) -> UnitDescriptor:
        """
        Register *body* as the unit for ``(year, day)``.

        *body* may be a class (instantiated without arguments), a module, or any object with a
        callable ``part1`` and optionally ``part2``.
        """
        key = PuzzleKey(year, day)
        name = unit_name(year, day)
        implementation = body() if inspect.isclass(body) else body
        if not supports(implementation, Operation.PART1):
            raise InvalidUnitError(name, f"{body!r} has no callable part1")
        descriptor = UnitDescriptor(
            key=key,
            name=name,
            implementation=implementation,
            has_part2=supports(implementation, Operation.PART2),
            module=module or _module_of(body),
        )
        self._units.register(key, descriptor)
        self._names.register(name, key)
        logger.debug("Registered unit %s from %s (part2=%s)", name, descriptor.module, descriptor.has_part2)
        return descriptor

    def generate_harness(
        self,
        year: int,
        day: int,
        test_class: type,
        *,
        import_unit: bool = True,
        doctest: bool = True,
    ) -> HarnessDescriptor:
        key = PuzzleKey(year, day)
        name = harness_name(year, day)
        descriptor = HarnessDescriptor(
            key=key,
            name=name,
            test_class=test_class,
            unit_imported=import_unit,
            doctest_enabled=doctest,
            module=test_class.__module__,
        )
        existing = self._harnesses.discard(key)
        if existing is not None:
            # Re-importing a test module redefines its harness.
            self._names.discard(existing.name)
        self._harnesses.register(key, descriptor)
        self._names.register(name, key)
        logger.debug("Registered harness %s", name)
        return descriptor

    # --- lookup ---
    def find(self, year: int, day: int) -> UnitDescriptor | None:
        return self._units.find(PuzzleKey(year, day))

    def get(self, year: int, day: int) -> UnitDescriptor:
        descriptor = self.find(year, day)
        if descriptor is None:
            raise UnitNotFoundError(year, day, available=self.names())
        return descriptor

    def find_harness(self, year: int, day: int) -> HarnessDescriptor | None:
        return self._harnesses.find(PuzzleKey(year, day))

    def keys(self) -> list[PuzzleKey]:
        return self._units.list()

    def names(self) -> list[str]:
        return [self._units[key].name for key in self._units.list()]

    def units_from(self, module_name: str) -> list[UnitDescriptor]:
        return [unit for unit in self._units.values() if unit.module == module_name]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, tuple):
            key = PuzzleKey(*key)
        return key in self._units

    def __len__(self) -> int:
        return len(self._units)

    # --- removal ---
    def discard(self, year: int, day: int) -> UnitDescriptor | None:
        descriptor = self._units.discard(PuzzleKey(year, day))
        if descriptor is not None:
            self._names.discard(descriptor.name)
        return descriptor

    def discard_module(self, module_name: str) -> list[PuzzleKey]:
        """Drop every unit and harness defined in *module_name*."""
        removed = self._units.discard_where(lambda unit: unit.module == module_name)
        removed_harnesses = self._harnesses.discard_where(lambda harness: harness.module == module_name)
        for key in removed:
            self._names.discard(key.unit_name)
        for key in removed_harnesses:
            self._names.discard(key.harness_name)
        if removed:
            logger.debug("Discarded %d unit(s) from %s", len(removed), module_name)
        return removed

    def clear(self) -> None:
        self._units.clear()
        self._harnesses.clear()
        self._names.clear()


_DEFAULT_REGISTRY = UnitRegistry("default")


def default_registry() -> UnitRegistry:
    return _DEFAULT_REGISTRY


def aoc(year: int, day: int, *, registry: UnitRegistry | None = None) -> Callable[[B], B]:
    """
    Register the decorated class as the solution for ``(year, day)``.

    The class is returned unchanged so it stays usable (and testable) on its own.
    """

    def _decorate(body: B) -> B:
        target = registry if registry is not None else _DEFAULT_REGISTRY
        target.generate(year, day, body)
        return body

    return _decorate


__all__ = ["UnitRegistry", "aoc", "default_registry"]
