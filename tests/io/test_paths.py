from __future__ import annotations

from pathlib import Path

import pytest

from aocutils.io.paths import ArtifactKind, example_path, input_path, resolve_path, validate_templates


def test_default_layout():
    assert input_path(2020, 1) == Path("input/2020_1.txt")
    assert example_path(2020, 1) == Path("input/2020_1_example_0.txt")
    assert example_path(2020, 1, 3, root="/aoc") == Path("/aoc/input/2020_1_example_3.txt")


def test_input_ignores_index():
    assert resolve_path(2020, 1, ArtifactKind.INPUT, 5) == resolve_path(2020, 1, ArtifactKind.INPUT)


def test_resolution_is_deterministic():
    first = [resolve_path(2021, d, kind, 2) for d in range(1, 26) for kind in ArtifactKind]
    second = [resolve_path(2021, d, kind, 2) for d in range(1, 26) for kind in ArtifactKind]
    assert first == second


@pytest.mark.parametrize("year", [2015, 2020, 2024])
def test_resolution_is_injective(year):
    keys = [(day, ArtifactKind.INPUT, None) for day in range(1, 26)]
    keys += [(day, ArtifactKind.EXAMPLE, n) for day in range(1, 26) for n in range(12)]
    paths = {resolve_path(year, day, kind, n) for day, kind, n in keys}
    assert len(paths) == len(keys)


def test_custom_templates_are_used():
    path = resolve_path(
        2020,
        7,
        "example",
        1,
        root="puzzles",
        input_template="{year}/{day:02d}/input.txt",
        example_template="{year}/{day:02d}/example{n}.txt",
    )
    assert path == Path("puzzles/2020/07/example1.txt")


def test_negative_example_index_is_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        resolve_path(2020, 1, ArtifactKind.EXAMPLE, -1)


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        resolve_path(2020, 1, "answer")


@pytest.mark.parametrize(
    "input_template, example_template, message",
    [
        ("input/{year}.txt", "input/{year}_{day}_{n}.txt", "missing"),
        ("input/{year}_{day}.txt", "input/{year}_{day}.txt", "missing"),
        ("input/{year}_{day}_{part}.txt", "input/{year}_{day}_{n}.txt", "unknown"),
        ("input/{year}_{day}.txt", "input/{year}_{day}_{}.txt", "unknown"),
        ("in/{year}_{day}.txt", "in/{year}_{day}{n}.txt", "separator after"),
        ("in/{year}{day}.txt", "in/{year}_{day}_{n}.txt", "separator after"),
        ("in/{year}_1{day}.txt", "in/{year}_{day}_{n}.txt", "separator before"),
        ("in/{year}_{day}_0.txt", "in/{year}_{day}_{n}.txt", "same file"),
    ],
)
def test_invalid_templates(input_template, example_template, message):
    with pytest.raises(ValueError, match=message):
        validate_templates(input_template, example_template)


def test_separated_custom_templates_are_accepted():
    validate_templates("{year}/{day:02d}/input.txt", "{year}/{day:02d}/example-{n}.txt")


def test_adjacent_numbers_would_collide():
    # Without a separator, example 1 of day 1 would read day 11's input.
    assert "in/{year}_{day}{n}.txt".format(year=2020, day=1, n=1) == "in/{year}_{day}.txt".format(year=2020, day=11)
    with pytest.raises(ValueError, match="separator"):
        validate_templates("in/{year}_{day}.txt", "in/{year}_{day}{n}.txt")
