"""
Deterministic file locations for puzzle inputs and examples.

Every ``(year, day, kind, index)`` maps to exactly one path and no two map to the same one,
which is what makes probing examples index by index reliable.
"""

from __future__ import annotations

import string
from enum import Enum
from pathlib import Path

DEFAULT_INPUT_TEMPLATE = "input/{year}_{day}.txt"
DEFAULT_EXAMPLE_TEMPLATE = "input/{year}_{day}_example_{n}.txt"

SAMPLE_YEARS = (2015, 2024)
SAMPLE_DAYS = range(1, 26)
SAMPLE_INDICES = range(0, 13)


class ArtifactKind(str, Enum):
    INPUT = "input"
    EXAMPLE = "example"


def _placeholders(template: str) -> set[str]:
    return {name for _, name, _, _ in string.Formatter().parse(template) if name is not None}


def _check_separated(label: str, template: str) -> None:
    """Each number must sit between non-digit literals so it can be read back unambiguously."""
    previous = None
    for literal, name, _, _ in string.Formatter().parse(template):
        if previous and (not literal or literal[0].isdigit()):
            raise ValueError(f"The {label} path template '{template}' needs a non-digit separator after {{{previous}}}.")
        if name and literal and literal[-1].isdigit():
            raise ValueError(f"The {label} path template '{template}' needs a non-digit separator before {{{name}}}.")
        previous = name


def _check_collisions(input_template: str, example_template: str) -> None:
    seen: dict[str, tuple] = {}
    for year in SAMPLE_YEARS:
        for day in SAMPLE_DAYS:
            candidates = [(("input", year, day), input_template.format(year=year, day=day))]
            candidates += [
                (("example", year, day, n), example_template.format(year=year, day=day, n=n)) for n in SAMPLE_INDICES
            ]
            for key, path in candidates:
                other = seen.setdefault(path, key)
                if other != key:
                    raise ValueError(f"The path templates resolve {other} and {key} to the same file '{path}'.")


def validate_templates(input_template: str, example_template: str) -> None:
    """
    Reject templates that would break determinism or injectivity.

    Raises:
        ValueError: when a required placeholder is missing, an unknown one is used, two numbers are
            not separated by a non-digit, or two artifacts of a sample calendar share a file.
    """
    for label, template, required in (
        ("input", input_template, {"year", "day"}),
        ("example", example_template, {"year", "day", "n"}),
    ):
        names = _placeholders(template)
        missing = required - names
        if missing:
            raise ValueError(
                f"The {label} path template '{template}' is missing placeholder(s): "
                + ", ".join("{" + name + "}" for name in sorted(missing))
            )
        unknown = names - required
        if unknown:
            raise ValueError(
                f"The {label} path template '{template}' uses unknown placeholder(s): "
                + ", ".join("{" + name + "}" for name in sorted(unknown))
            )
        _check_separated(label, template)
    _check_collisions(input_template, example_template)


def resolve_path(
    year: int,
    day: int,
    kind: ArtifactKind | str,
    index: int | None = None,
    *,
    root: str | Path = ".",
    input_template: str = DEFAULT_INPUT_TEMPLATE,
    example_template: str = DEFAULT_EXAMPLE_TEMPLATE,
) -> Path:
    """
    Return the path of an input or example file.

    The input ignores *index*; examples are zero-indexed and default to the first one.

    Examples:
        >>> resolve_path(2020, 1, "input").as_posix()
        'input/2020_1.txt'
        >>> resolve_path(2020, 1, ArtifactKind.EXAMPLE).as_posix()
        'input/2020_1_example_0.txt'
        >>> resolve_path(2020, 1, "example", 2, root="aoc").as_posix()
        'aoc/input/2020_1_example_2.txt'
    """
    kind = ArtifactKind(kind)
    if kind is ArtifactKind.INPUT:
        relative = input_template.format(year=year, day=day)
    else:
        n = 0 if index is None else index
        if n < 0:
            raise ValueError(f"Example index must be non-negative, got {n}.")
        relative = example_template.format(year=year, day=day, n=n)
    return Path(root) / relative


def input_path(year: int, day: int, **layout) -> Path:
    return resolve_path(year, day, ArtifactKind.INPUT, **layout)


def example_path(year: int, day: int, n: int = 0, **layout) -> Path:
    return resolve_path(year, day, ArtifactKind.EXAMPLE, n, **layout)


__all__ = [
    "ArtifactKind",
    "DEFAULT_INPUT_TEMPLATE",
    "DEFAULT_EXAMPLE_TEMPLATE",
    "validate_templates",
    "resolve_path",
    "input_path",
    "example_path",
]
