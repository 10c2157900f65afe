"""
aocutils exception hierarchy.

Every failure in puzzle resolution and dispatch is a configuration or programmer error that is
meant to be fixed and re-run, so nothing here is retried. All aocutils-specific exceptions
inherit from AOCError for easy catching.

Example:
    try:
        answer = p1i(year=2020, day=1)
    except AOCError as e:
        print(f"Dispatch failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from difflib import get_close_matches
from pathlib import Path
from typing import Any

from .keys import unit_name


class AOCError(Exception):
    """
    Base exception for all aocutils errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


def _format_key(year: int, day: int) -> str:
    return f"{year}, day {day}"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AOCError):
    """Raised when configuration is invalid."""

    pass


class ConfigurationIncompleteError(ConfigurationError):
    """Raised when a puzzle field has no value in any precedence tier."""

    def __init__(self, field: str) -> None:
        message = f"Could not resolve '{field}': no explicit value, no process default and no clock."
        suggestion = f"Pass {field}=... explicitly or set it with aocutils.config.configure({field}=...)"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Registry Errors
# =============================================================================


class RegistryError(AOCError):
    """Base class for unit registration and lookup errors."""

    pass


class UnitNotFoundError(RegistryError):
    """Raised when no unit was generated for the resolved puzzle."""

    def __init__(self, year: int, day: int, available: list[str] | None = None) -> None:
        name = unit_name(year, day)
        message = f"No solution unit for year {_format_key(year, day)} ('{name}')."
        matches = get_close_matches(name, available or [], n=3, cutoff=0.8)
        if matches:
            suggestion = f"Did you mean one of: {', '.join(matches)}?"
        else:
            suggestion = f"Decorate a solution class with @aoc({year}, {day}) and make sure its module is imported"
        super().__init__(message, suggestion, {"year": year, "day": day, "name": name})
        self.year = year
        self.day = day


class DuplicateUnitError(RegistryError):
    """Raised when a second unit is generated for an already registered puzzle."""

    def __init__(self, year: int, day: int, existing_module: str | None, new_module: str | None) -> None:
        message = (
            f"A unit for year {_format_key(year, day)} is already registered"
            f" (defined in {existing_module or '<unknown>'}, redefined in {new_module or '<unknown>'})."
        )
        suggestion = "Remove one of the definitions or discard the existing unit before registering again"
        super().__init__(
            message,
            suggestion,
            {"year": year, "day": day, "existing_module": existing_module, "new_module": new_module},
        )


class InvalidUnitError(RegistryError):
    """Raised when a body does not implement the solution contract."""

    def __init__(self, name: str, reason: str) -> None:
        message = f"Cannot register '{name}': {reason}."
        suggestion = "A solution must define part1(input) and may define part2(input)"
        super().__init__(message, suggestion, {"name": name})


# =============================================================================
# Dispatch Errors
# =============================================================================


class OperationNotImplementedError(AOCError):
    """Raised when the requested part is missing on an otherwise valid unit."""

    def __init__(self, year: int, day: int, operation: str) -> None:
        message = f"The unit for year {_format_key(year, day)} does not implement {operation}."
        suggestion = f"Define {operation}(input) on the solution (day 25 has no second part)"
        super().__init__(message, suggestion, {"year": year, "day": day, "operation": operation})


class ArtifactMissingError(AOCError):
    """Raised when an input or example file does not exist."""

    def __init__(self, path: str | Path, kind: str = "input") -> None:
        message = f"No {kind} file at '{path}'."
        suggestion = f"Download the {kind} for this puzzle or check the configured root and path templates"
        super().__init__(message, suggestion, {"path": str(path), "kind": kind})
        self.path = Path(path)


class BuildFailureError(AOCError):
    """Raised when rebuilding the solution units fails."""

    def __init__(self, target: str, cause: BaseException) -> None:
        message = f"Rebuilding '{target}' failed: {type(cause).__name__}: {cause}"
        suggestion = "Fix the error in the solution module; the previous unit is not used after a failed rebuild"
        super().__init__(message, suggestion, {"target": target})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "AOCError",
    # Configuration
    "ConfigurationError",
    "ConfigurationIncompleteError",
    # Registry
    "RegistryError",
    "UnitNotFoundError",
    "DuplicateUnitError",
    "InvalidUnitError",
    # Dispatch
    "OperationNotImplementedError",
    "ArtifactMissingError",
    "BuildFailureError",
]
