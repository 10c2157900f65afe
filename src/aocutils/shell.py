"""
Short helpers for an interactive session.

Run ``from aocutils.shell import *`` in a REPL, then::

    p1e()                  # part 1 of today's first example
    p2i(day=3, time=True)  # part 2 of day 3's input, timed
    list_examples(day=3)

Every helper accepts the keyword options ``year``, ``day``, ``n`` (example index) and ``time``;
anything left out falls back to the process defaults and then to today's date.

The helpers share one lazily built ``Dispatcher``. Building it attaches a console handler to the
``aocutils`` logger unless logging is already configured. When ``solutions_package`` is set
(``AOC_SOLUTIONS``), that package is imported on first use and, with ``auto_compile`` on,
reloaded before every call so edits are picked up without restarting the session.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Any

from aocutils.config.defaults import get_defaults
from aocutils.config.resolver import ResolvedOptions
from aocutils.dispatch import Dispatcher, Explicit, FromExample, FromInput
from aocutils.engine.contract import Operation
from aocutils.engine.discovery import discover
from aocutils.engine.rebuild import ModuleReloader
from aocutils.engine.units import default_registry
from aocutils.foundation.logging import configure_aocutils_logging

logger = logging.getLogger(__name__)

_LOCK = Lock()
_DISPATCHER: Dispatcher | None = None


def _build_default_dispatcher() -> Dispatcher:
    configure_aocutils_logging()
    registry = default_registry()
    package = get_defaults().solutions_package
    rebuilder = None
    if package:
        discover(package, registry)
        rebuilder = ModuleReloader(package, registry)
        logger.info("Loaded %d unit(s); %s is reloaded before calls when auto_compile is on", len(registry), package)
    return Dispatcher(registry=registry, rebuilder=rebuilder)


def get_dispatcher() -> Dispatcher:
    global _DISPATCHER
    with _LOCK:
        if _DISPATCHER is None:
            _DISPATCHER = _build_default_dispatcher()
        return _DISPATCHER


def set_dispatcher(dispatcher: Dispatcher) -> Dispatcher:
    """Back the helpers with *dispatcher* (tests, custom registries)."""
    global _DISPATCHER
    with _LOCK:
        _DISPATCHER = dispatcher
    return dispatcher


def reset_dispatcher() -> None:
    global _DISPATCHER
    with _LOCK:
        _DISPATCHER = None


def _options(**kwargs: Any) -> ResolvedOptions:
    return ResolvedOptions.from_kwargs(**kwargs)


def mod(*, year: int | None = None, day: int | None = None) -> Any:
    """The unit for the puzzle."""
    return get_dispatcher().unit(_options(year=year, day=day))


def p1(raw_input: str, *, year: int | None = None, day: int | None = None, time: bool | None = None) -> Any:
    """Part 1 on the given text."""
    return get_dispatcher().invoke_operation(Operation.PART1, Explicit(raw_input), _options(year=year, day=day, time=time))


def p2(raw_input: str, *, year: int | None = None, day: int | None = None, time: bool | None = None) -> Any:
    """Part 2 on the given text."""
    return get_dispatcher().invoke_operation(Operation.PART2, Explicit(raw_input), _options(year=year, day=day, time=time))


def p1e(*, year: int | None = None, day: int | None = None, n: int | None = None, time: bool | None = None) -> Any:
    """Part 1 on example *n* (0 by default)."""
    options = _options(year=year, day=day, n=n, time=time)
    return get_dispatcher().invoke_operation(Operation.PART1, FromExample(), options)


def p1i(*, year: int | None = None, day: int | None = None, time: bool | None = None) -> Any:
    """Part 1 on the puzzle input."""
    return get_dispatcher().invoke_operation(Operation.PART1, FromInput(), _options(year=year, day=day, time=time))


def p2e(*, year: int | None = None, day: int | None = None, n: int | None = None, time: bool | None = None) -> Any:
    """Part 2 on example *n* (0 by default)."""
    options = _options(year=year, day=day, n=n, time=time)
    return get_dispatcher().invoke_operation(Operation.PART2, FromExample(), options)


def p2i(*, year: int | None = None, day: int | None = None, time: bool | None = None) -> Any:
    """Part 2 on the puzzle input."""
    return get_dispatcher().invoke_operation(Operation.PART2, FromInput(), _options(year=year, day=day, time=time))


def input_path(*, year: int | None = None, day: int | None = None) -> Path:
    return get_dispatcher().input_path(_options(year=year, day=day))


def example_path(*, year: int | None = None, day: int | None = None, n: int | None = None) -> Path:
    return get_dispatcher().example_path(_options(year=year, day=day, n=n))


def input_string(*, year: int | None = None, day: int | None = None) -> str:
    return get_dispatcher().input_text(_options(year=year, day=day))


def example_string(*, year: int | None = None, day: int | None = None, n: int | None = None) -> str:
    return get_dispatcher().example_text(_options(year=year, day=day, n=n))


def list_examples(*, year: int | None = None, day: int | None = None) -> None:
    """Print every example of the puzzle with its index."""
    get_dispatcher().list_examples(_options(year=year, day=day))


__all__ = [
    "example_path",
    "example_string",
    "input_path",
    "input_string",
    "list_examples",
    "mod",
    "p1",
    "p1e",
    "p1i",
    "p2",
    "p2e",
    "p2i",
]
