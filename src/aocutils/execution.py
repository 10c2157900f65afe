"""
Execution helpers for invoking one part of a unit.

This keeps the invocation and its timing isolated from resolution and input loading.
"""
from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, TextIO


@dataclass
class CallResult:
    """Container for the value a part returned plus timing, when measured."""

    value: Any
    elapsed_ms: float | None = None


def format_elapsed(elapsed_ms: float) -> str:
    """
    >>> format_elapsed(1.5)
    '⏱️ 1.500 ms'
    """
    return f"⏱️ {elapsed_ms:.3f} ms"


def call_unit(
    fn: Callable[[str], Any],
    raw_input: str,
    *,
    timed: bool = False,
    echo: TextIO | None = None,
) -> CallResult:
    if not timed:
        return CallResult(value=fn(raw_input))
    start = time.perf_counter()
    value = fn(raw_input)
    end = time.perf_counter()
    elapsed_ms = (end - start) * 1000.0
    print(format_elapsed(elapsed_ms), file=echo if echo is not None else sys.stdout)
    return CallResult(value=value, elapsed_ms=elapsed_ms)


__all__ = ["CallResult", "call_unit", "format_elapsed"]
