from __future__ import annotations

import importlib
import sys
import textwrap
import uuid
from datetime import datetime
from pathlib import Path

import pytest

from aocutils.config.defaults import reset_defaults
from aocutils.engine.units import UnitRegistry, default_registry
from aocutils.foundation.clock import fixed_clock
from aocutils.shell import reset_dispatcher

AOC_ENV_VARS = (
    "AOC_YEAR",
    "AOC_DAY",
    "AOC_AUTO_COMPILE",
    "AOC_TIME_CALLS",
    "AOC_TIMEZONE",
    "AOC_ROOT",
    "AOC_SOLUTIONS",
)


@pytest.fixture(autouse=True)
def _isolated_process_state(monkeypatch):
    """Every test starts from a clean environment and fresh process defaults."""
    for name in AOC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_defaults()
    reset_dispatcher()
    yield
    reset_defaults()
    reset_dispatcher()


@pytest.fixture
def registry():
    return UnitRegistry("test")


@pytest.fixture
def clock():
    return fixed_clock(datetime(1991, 8, 8, 12, 0))


@pytest.fixture
def puzzle_files(tmp_path):
    """Write puzzle files under ``tmp_path``; returns a writer taking a relative path and text."""

    def _write(relative: str, text: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def solutions_package(tmp_path, monkeypatch):
    """
    Build an importable package of solution modules under ``tmp_path``.

    Returns a factory taking ``{relative_module_path: source}``; the package name is unique per
    test so module caches never leak between tests.
    """
    created: list[str] = []
    monkeypatch.syspath_prepend(str(tmp_path))
    # Rewritten sources must never be shadowed by bytecode cached in the same second.
    monkeypatch.setattr(sys, "dont_write_bytecode", True)

    def _make(files: dict[str, str]) -> str:
        name = f"aoc_solutions_{uuid.uuid4().hex[:8]}"
        root = tmp_path / name
        root.mkdir()
        (root / "__init__.py").write_text("", encoding="utf-8")
        for relative, source in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            init = path.parent / "__init__.py"
            if not init.exists():
                init.write_text("", encoding="utf-8")
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        created.append(name)
        importlib.invalidate_caches()
        return name

    yield _make

    for name in created:
        for module in [m for m in sys.modules if m == name or m.startswith(f"{name}.")]:
            del sys.modules[module]


@pytest.fixture
def default_units():
    """The process-wide registry; units added during the test are discarded afterwards."""
    target = default_registry()
    before = set(target.keys())
    yield target
    for key in set(target.keys()) - before:
        target.discard(key.year, key.day)
