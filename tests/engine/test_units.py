from __future__ import annotations

import types

import pytest

from aocutils.engine.contract import HasPart2, Operation, Solution, supports
from aocutils.engine.units import UnitRegistry, aoc, default_registry
from aocutils.foundation.exceptions import DuplicateUnitError, InvalidUnitError, UnitNotFoundError
from aocutils.foundation.keys import PuzzleKey


class BothParts:
    def part1(self, raw_input):
        return len(raw_input)

    def part2(self, raw_input):
        return raw_input[::-1]


class OnlyPart1:
    def part1(self, raw_input):
        return raw_input.upper()


def test_generate_instantiates_class(registry):
    descriptor = registry.generate(2020, 1, BothParts)
    assert descriptor.key == PuzzleKey(2020, 1)
    assert descriptor.name == "Y2020.D1"
    assert isinstance(descriptor.implementation, BothParts)
    assert descriptor.has_part2 is True
    assert descriptor.module == __name__


def test_generate_detects_missing_part2(registry):
    descriptor = registry.generate(2020, 25, OnlyPart1)
    assert descriptor.has_part2 is False
    assert not supports(descriptor.implementation, Operation.PART2)


def test_generate_accepts_module_body(registry):
    module = types.ModuleType("solutions.y2020.d03")
    module.part1 = lambda raw_input: 7
    descriptor = registry.generate(2020, 3, module)
    assert descriptor.implementation is module
    assert descriptor.module == "solutions.y2020.d03"
    assert descriptor.has_part2 is False


def test_body_without_part1_is_invalid(registry):
    class NotASolution:
        def solve(self, raw_input):
            return None

    with pytest.raises(InvalidUnitError, match="Y2020.D4"):
        registry.generate(2020, 4, NotASolution)
    assert (2020, 4) not in registry


def test_non_callable_part1_is_invalid(registry):
    class Broken:
        part1 = 3

    with pytest.raises(InvalidUnitError):
        registry.generate(2020, 5, Broken)


def test_duplicate_generation_is_rejected(registry):
    registry.generate(2020, 1, BothParts)
    with pytest.raises(DuplicateUnitError, match="already registered"):
        registry.generate(2020, 1, OnlyPart1)
    assert isinstance(registry.get(2020, 1).implementation, BothParts)


def test_neighbouring_days_have_distinct_names(registry):
    first = registry.generate(2020, 1, BothParts)
    second = registry.generate(2020, 2, BothParts)
    assert first.name != second.name
    assert registry.names() == ["Y2020.D1", "Y2020.D2"]


def test_get_missing_unit(registry):
    registry.generate(2020, 1, BothParts)
    with pytest.raises(UnitNotFoundError, match="Y2020.D11"):
        registry.get(2020, 11)
    assert registry.find(2020, 11) is None


def test_contains_and_len(registry):
    registry.generate(2019, 3, BothParts)
    assert (2019, 3) in registry
    assert PuzzleKey(2019, 3) in registry
    assert (2019, 4) not in registry
    assert len(registry) == 1
    assert registry.keys() == [PuzzleKey(2019, 3)]


def test_discard_allows_regeneration(registry):
    registry.generate(2020, 1, BothParts)
    removed = registry.discard(2020, 1)
    assert removed is not None
    registry.generate(2020, 1, OnlyPart1)
    assert registry.get(2020, 1).has_part2 is False


def test_discard_module_removes_units_and_harnesses(registry):
    registry.generate(2020, 1, BothParts, module="solutions.a")
    registry.generate(2020, 2, BothParts, module="solutions.a")
    registry.generate(2020, 3, BothParts, module="solutions.b")

    removed = registry.discard_module("solutions.a")

    assert sorted(removed) == [PuzzleKey(2020, 1), PuzzleKey(2020, 2)]
    assert registry.keys() == [PuzzleKey(2020, 3)]
    registry.generate(2020, 1, OnlyPart1, module="solutions.a")


def test_harness_names_never_collide_with_units(registry):
    class TestHarness:
        pass

    registry.generate(2020, 1, BothParts)
    harness = registry.generate_harness(2020, 1, TestHarness)
    assert harness.name == "Y2020.D1.Harness"
    assert registry.find_harness(2020, 1) is harness
    again = registry.generate_harness(2020, 1, TestHarness, doctest=False)
    assert registry.find_harness(2020, 1) is again


def test_aoc_decorator_returns_class_unchanged(registry):
    @aoc(2021, 6, registry=registry)
    class Lanternfish:
        def part1(self, raw_input):
            return 5934

    assert Lanternfish().part1("") == 5934
    assert isinstance(registry.get(2021, 6).implementation, Lanternfish)


def test_aoc_decorator_uses_default_registry():
    target = default_registry()

    @aoc(1901, 1)
    class Ancient:
        def part1(self, raw_input):
            return "old"

    try:
        assert target.get(1901, 1).implementation.part1("") == "old"
    finally:
        target.discard(1901, 1)


def test_protocols_are_runtime_checkable():
    assert isinstance(BothParts(), Solution)
    assert isinstance(BothParts(), HasPart2)
    assert not isinstance(OnlyPart1(), HasPart2)


def test_empty_registry_is_usable_as_target():
    empty = UnitRegistry("empty")
    assert len(empty) == 0

    @aoc(2020, 9, registry=empty)
    class Late:
        def part1(self, raw_input):
            return 1

    assert (2020, 9) in empty
    assert (2020, 9) not in default_registry()
