"""
Pytest harnesses paired with solution units.

``aoc_test`` turns a plain pytest class into the test companion of one unit::

    from aocutils import aoc_test

    @aoc_test(2020, 1)
    class TestDay1:
        def test_example(self):
            assert self.part1(self.example_string()) == 514579

The decorated class gains:

- ``input_path()``, ``example_path(n=0)``, ``input_string()`` and ``example_string(n=0)``,
  scoped to the puzzle and resolved against the current process defaults;
- ``unit``, ``part1`` and ``part2`` (when implemented), unless ``import_unit=False``;
- ``test_doctests``, which runs every ``>>>`` example found in the unit's module, unless
  ``doctest=False``.
"""

from __future__ import annotations

import doctest as _doctest
import io
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from aocutils.config.defaults import get_defaults
from aocutils.io.loader import InputLoader
from aocutils.io.paths import ArtifactKind, resolve_path

from .contract import UnitDescriptor
from .units import UnitRegistry, default_registry

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

DOCTEST_FLAGS = _doctest.ELLIPSIS | _doctest.NORMALIZE_WHITESPACE


@dataclass
class DoctestReport:
    attempted: int = 0
    failed: int = 0
    output: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0


def _doctest_targets(descriptor: UnitDescriptor) -> list[tuple[Any, str]]:
    module = sys.modules.get(descriptor.module) if descriptor.module else None
    if module is not None:
        return [(module, module.__name__)]
    implementation = descriptor.implementation
    target = implementation if isinstance(implementation, type) else type(implementation)
    return [(target, descriptor.name)]


def run_unit_doctests(descriptor: UnitDescriptor) -> DoctestReport:
    """Evaluate the ``>>>`` examples embedded in a unit's docstrings."""
    report = DoctestReport()
    finder = _doctest.DocTestFinder(exclude_empty=True)
    runner = _doctest.DocTestRunner(optionflags=DOCTEST_FLAGS)
    for target, name in _doctest_targets(descriptor):
        for test in finder.find(target, name):
            buffer = io.StringIO()
            result = runner.run(test, out=buffer.write)
            report.attempted += result.attempted
            report.failed += result.failed
            if result.failed:
                report.output.append(buffer.getvalue())
    logger.debug("Doctests for %s: %d attempted, %d failed", descriptor.name, report.attempted, report.failed)
    return report


def _layout() -> dict[str, Any]:
    defaults = get_defaults()
    return {
        "root": defaults.root_path,
        "input_template": defaults.input_template,
        "example_template": defaults.example_template,
    }


def _accessors(year: int, day: int, loader: InputLoader) -> dict[str, Callable[..., Any]]:
    def input_path() -> Path:
        return resolve_path(year, day, ArtifactKind.INPUT, **_layout())

    def example_path(n: int = 0) -> Path:
        return resolve_path(year, day, ArtifactKind.EXAMPLE, n, **_layout())

    def input_string() -> str:
        return loader.load(input_path(), ArtifactKind.INPUT)

    def example_string(n: int = 0) -> str:
        return loader.load(example_path(n), ArtifactKind.EXAMPLE)

    return {
        "input_path": input_path,
        "example_path": example_path,
        "input_string": input_string,
        "example_string": example_string,
    }


def aoc_test(
    year: int,
    day: int,
    *,
    import_unit: bool = True,
    doctest: bool = True,
    registry: UnitRegistry | None = None,
    loader: InputLoader | None = None,
) -> Callable[[C], C]:
    """Wire a pytest class to the unit for ``(year, day)``; see the module docstring."""
    target = registry if registry is not None else default_registry()
    loader = loader or InputLoader()

    def _decorate(cls: C) -> C:
        for name, accessor in _accessors(year, day, loader).items():
            setattr(cls, name, staticmethod(accessor))

        if import_unit:
            # Like importing a module that does not exist, a missing unit fails at definition time.
            descriptor = target.get(year, day)
            cls.unit = descriptor.implementation
            cls.part1 = staticmethod(descriptor.implementation.part1)
            if descriptor.has_part2:
                cls.part2 = staticmethod(descriptor.implementation.part2)

        if doctest:

            def test_doctests(self) -> None:
                report = run_unit_doctests(target.get(year, day))
                assert report.ok, "\n".join(report.output)

            test_doctests.__qualname__ = f"{cls.__qualname__}.test_doctests"
            cls.test_doctests = test_doctests

        target.generate_harness(year, day, cls, import_unit=import_unit, doctest=doctest)
        return cls

    return _decorate


__all__ = ["DoctestReport", "aoc_test", "run_unit_doctests"]
