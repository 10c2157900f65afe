"""
Clock collaborator used as the last precedence tier when resolving the current puzzle.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError

Clock = Callable[[str | None], datetime]


def current_datetime(timezone: str | None = None) -> datetime:
    """
    Return the current date and time.

    Uses the IANA zone *timezone* when given, otherwise the naive local clock. Puzzles unlock at
    midnight US Eastern time, so ``"America/New_York"`` is the usual choice when solving from
    another time zone.
    """
    if not timezone:
        return datetime.now()
    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(
            f"Unknown time zone '{timezone}'.",
            suggestion="Use an IANA zone name such as 'America/New_York' (install 'tzdata' on Windows)",
            details={"timezone": timezone},
        ) from exc
    return datetime.now(zone)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports *moment*, whatever time zone is asked for."""

    def _clock(timezone: str | None = None) -> datetime:
        return moment

    return _clock


__all__ = ["Clock", "current_datetime", "fixed_clock"]
