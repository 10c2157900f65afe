"""
Three-tier resolution of "which puzzle, right now".

Each of ``year`` and ``day`` is resolved on its own:

1. the value passed at the call site;
2. the process default (``aocutils.config.configure`` / ``AOC_YEAR`` / ``AOC_DAY``);
3. the clock, in the configured time zone or the naive local time.

A caller can therefore pin the year and let the day follow the calendar, or the reverse.
No calendar bounds are checked here; an impossible puzzle simply has no unit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from aocutils.foundation.clock import Clock, current_datetime
from aocutils.foundation.exceptions import ConfigurationIncompleteError
from aocutils.foundation.keys import PuzzleKey

from .defaults import ProcessDefaults, get_defaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedOptions:
    """Per-call overrides; ``None`` defers to the next tier."""

    year: int | None = None
    day: int | None = None
    example_index: int | None = None
    time: bool | None = None

    @classmethod
    def from_kwargs(cls, *, year=None, day=None, n=None, example_index=None, time=None) -> "ResolvedOptions":
        """Accept the short ``n=`` spelling used by the interactive helpers."""
        return cls(year=year, day=day, example_index=example_index if example_index is not None else n, time=time)


class ConfigResolver:
    """
    Merge explicit options, process defaults and the clock.

    Args:
        defaults: a fixed ``ProcessDefaults`` or a callable returning the current ones. Defaults
            to the process-wide instance, read on every call.
        clock: returns the current datetime for a time zone name; ``None`` disables the last tier.
    """

    def __init__(
        self,
        defaults: ProcessDefaults | Callable[[], ProcessDefaults] | None = None,
        clock: Clock | None = current_datetime,
    ) -> None:
        if defaults is None:
            self._defaults: Callable[[], ProcessDefaults] = get_defaults
        elif isinstance(defaults, ProcessDefaults):
            self._defaults = lambda: defaults
        else:
            self._defaults = defaults
        self._clock = clock

    @property
    def defaults(self) -> ProcessDefaults:
        return self._defaults()

    def resolve(self, explicit: ResolvedOptions | None = None) -> PuzzleKey:
        explicit = explicit or ResolvedOptions()
        defaults = self._defaults()
        now: datetime | None = None

        def _pick(field: str) -> int:
            nonlocal now
            value = getattr(explicit, field)
            if value is not None:
                return value
            value = getattr(defaults, field)
            if value is not None:
                return value
            if self._clock is None:
                raise ConfigurationIncompleteError(field)
            if now is None:
                now = self._clock(defaults.timezone)
            return getattr(now, field)

        key = PuzzleKey(year=_pick("year"), day=_pick("day"))
        logger.debug("Resolved puzzle %s (explicit=%s)", key, explicit)
        return key

    def resolve_example_index(self, explicit: ResolvedOptions | None = None) -> int:
        if explicit is None or explicit.example_index is None:
            return 0
        return explicit.example_index

    def resolve_timing(self, explicit: ResolvedOptions | None = None) -> bool:
        if explicit is not None and explicit.time is not None:
            return bool(explicit.time)
        return self._defaults().time_calls


__all__ = ["ConfigResolver", "PuzzleKey", "ResolvedOptions"]
