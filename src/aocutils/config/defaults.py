"""
Process-wide defaults: the middle tier of puzzle resolution.

Lifecycle:
    - Built from the environment on first access (``get_defaults()``).
    - Rewritten with ``configure(...)`` or ``load_defaults(path)`` at any point in the process.
    - Dropped with ``reset_defaults()`` so the next access re-reads the environment.

Reads and writes are serialised by a module lock. Nothing here is written back to disk.

Recognised environment variables:
    AOC_YEAR, AOC_DAY, AOC_AUTO_COMPILE, AOC_TIME_CALLS, AOC_TIMEZONE, AOC_ROOT, AOC_SOLUTIONS
"""

from __future__ import annotations

import dataclasses
import logging
import os
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from aocutils.foundation.exceptions import ConfigurationError
from aocutils.io.paths import DEFAULT_EXAMPLE_TEMPLATE, DEFAULT_INPUT_TEMPLATE, validate_templates

from .loader import load_config_file

logger = logging.getLogger(__name__)

CONFIG_SECTION = "aocutils"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer, got '{raw}'.",
            details={"variable": name},
        ) from exc


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    text = raw.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigurationError(
        f"Environment variable {name} must be a boolean, got '{raw}'.",
        suggestion="Use one of: 1, 0, true, false, yes, no, on, off",
        details={"variable": name},
    )


def _env_str(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


@dataclass(frozen=True)
class ProcessDefaults:
    year: int | None = None
    day: int | None = None
    auto_compile: bool = False
    time_calls: bool = False
    timezone: str | None = None
    root: str = "."
    input_template: str = DEFAULT_INPUT_TEMPLATE
    example_template: str = DEFAULT_EXAMPLE_TEMPLATE
    # Dotted package imported by the interactive helpers and reloaded when auto_compile is on.
    solutions_package: str | None = None

    def __post_init__(self) -> None:
        for name in ("year", "day"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(
                    f"'{name}' must be a positive integer, got {value!r}.",
                    details={"field": name, "value": value},
                )
        for name in ("auto_compile", "time_calls"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(
                    f"'{name}' must be a boolean, got {getattr(self, name)!r}.",
                    details={"field": name},
                )
        try:
            validate_templates(self.input_template, self.example_template)
        except ValueError as exc:
            raise ConfigurationError(str(exc), details={"field": "templates"}) from exc

    @classmethod
    def from_env(cls) -> "ProcessDefaults":
        return cls(
            year=_env_int("AOC_YEAR"),
            day=_env_int("AOC_DAY"),
            auto_compile=_env_bool("AOC_AUTO_COMPILE"),
            time_calls=_env_bool("AOC_TIME_CALLS"),
            timezone=_env_str("AOC_TIMEZONE"),
            root=_env_str("AOC_ROOT") or ".",
            solutions_package=_env_str("AOC_SOLUTIONS"),
        )

    @property
    def root_path(self) -> Path:
        return Path(self.root).expanduser()

    def replace(self, **changes: Any) -> "ProcessDefaults":
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown setting(s): {', '.join(unknown)}.",
                suggestion=f"Known settings: {', '.join(sorted(known))}",
                details={"unknown": unknown},
            )
        return dataclasses.replace(self, **changes)


_LOCK = threading.RLock()
_DEFAULTS: ProcessDefaults | None = None


def get_defaults() -> ProcessDefaults:
    """Return the process defaults, building them from the environment on first use."""
    global _DEFAULTS
    with _LOCK:
        if _DEFAULTS is None:
            _DEFAULTS = ProcessDefaults.from_env()
            logger.debug("Initialised process defaults from environment: %s", _DEFAULTS)
        return _DEFAULTS


def set_defaults(defaults: ProcessDefaults) -> ProcessDefaults:
    global _DEFAULTS
    with _LOCK:
        _DEFAULTS = defaults
        return defaults


def configure(**changes: Any) -> ProcessDefaults:
    """
    Rewrite individual process defaults.

    Example:
        >>> configure(year=1991, day=8).year
        1991
        >>> reset_defaults()
    """
    with _LOCK:
        updated = get_defaults().replace(**changes)
        logger.debug("Process defaults updated: %s", ", ".join(sorted(changes)) or "<nothing>")
        return set_defaults(updated)


def load_defaults(path: str | Path) -> ProcessDefaults:
    """Apply settings from a YAML/JSON file, read from its ``aocutils:`` section when present."""
    data = load_config_file(path)
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{CONFIG_SECTION}' in '{path}' must be a mapping.",
            details={"path": str(path)},
        )
    return configure(**section)


def reset_defaults() -> None:
    global _DEFAULTS
    with _LOCK:
        _DEFAULTS = None


@contextmanager
def defaults_context(**changes: Any) -> Iterator[ProcessDefaults]:
    """Temporarily apply *changes*; the previous defaults are restored on exit."""
    with _LOCK:
        previous = _DEFAULTS
    try:
        yield configure(**changes)
    finally:
        with _LOCK:
            _restore(previous)


def _restore(previous: ProcessDefaults | None) -> None:
    global _DEFAULTS
    _DEFAULTS = previous


__all__ = [
    "ProcessDefaults",
    "get_defaults",
    "set_defaults",
    "configure",
    "load_defaults",
    "reset_defaults",
    "defaults_context",
]
