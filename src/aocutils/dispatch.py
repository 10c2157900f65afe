"""
Dispatcher: from "part 2 of today's example" to a returned answer.

A dispatch runs in a fixed order:

1. resolve the puzzle key (explicit options, process defaults, clock);
2. rebuild the solution units when auto-compile is enabled and a rebuilder is available;
3. look the unit up;
4. for part 2, check the unit implements it;
5. load the input text (verbatim, the puzzle input, or an example);
6. decide whether to time the call;
7. invoke the part and return its value unchanged.

Checking the capability before loading means a missing ``part2`` is reported even when the
input file does not exist yet.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, TextIO, Union

from aocutils.config.defaults import ProcessDefaults
from aocutils.config.resolver import ConfigResolver, ResolvedOptions
from aocutils.engine.contract import Operation, UnitDescriptor, supports
from aocutils.engine.rebuild import Rebuilder
from aocutils.engine.units import UnitRegistry, default_registry
from aocutils.execution import call_unit
from aocutils.foundation.clock import Clock, current_datetime
from aocutils.foundation.exceptions import BuildFailureError, OperationNotImplementedError
from aocutils.foundation.keys import PuzzleKey
from aocutils.io.loader import InputLoader
from aocutils.io.paths import ArtifactKind, resolve_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Explicit:
    """Raw text supplied by the caller, used verbatim."""

    text: str


@dataclass(frozen=True)
class FromInput:
    """The puzzle input file."""


@dataclass(frozen=True)
class FromExample:
    """The example file with the given zero-based index; ``None`` defers to the options."""

    index: int | None = None


InputSource = Union[Explicit, FromInput, FromExample]


class Dispatcher:
    """
    Resolve, look up, load and invoke solution parts.

    Args:
        registry: unit registry to look units up in (process-wide by default).
        defaults: fixed ``ProcessDefaults``; ``None`` reads the process-wide ones on every call.
        clock: last-tier clock; ``None`` makes unresolved fields an error.
        loader: reads input and example files.
        rebuilder: run before lookup when ``auto_compile`` is enabled.
        stream: where timing notices and example listings are printed (stdout by default).
    """

    def __init__(
        self,
        registry: UnitRegistry | None = None,
        defaults: ProcessDefaults | None = None,
        clock: Clock | None = current_datetime,
        loader: InputLoader | None = None,
        rebuilder: Rebuilder | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.resolver = ConfigResolver(defaults, clock)
        self.loader = loader or InputLoader()
        self.rebuilder = rebuilder
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys and redirected stdout are honoured.
        return self._stream if self._stream is not None else sys.stdout

    # --- resolution ---
    def resolve(self, options: ResolvedOptions | None = None) -> PuzzleKey:
        return self.resolver.resolve(options)

    def _layout(self) -> dict[str, Any]:
        defaults = self.resolver.defaults
        return {
            "root": defaults.root_path,
            "input_template": defaults.input_template,
            "example_template": defaults.example_template,
        }

    def _maybe_rebuild(self) -> None:
        if self.rebuilder is None or not self.resolver.defaults.auto_compile:
            return
        logger.debug("Auto-compile enabled; rebuilding before lookup")
        try:
            self.rebuilder.rebuild()
        except BuildFailureError:
            raise
        except Exception as exc:
            target = getattr(self.rebuilder, "package", type(self.rebuilder).__name__)
            raise BuildFailureError(target, exc) from exc

    def _lookup(self, options: ResolvedOptions | None) -> tuple[PuzzleKey, UnitDescriptor]:
        key = self.resolve(options)
        self._maybe_rebuild()
        return key, self.registry.get(key.year, key.day)

    # --- paths and text ---
    def input_path(self, options: ResolvedOptions | None = None) -> Path:
        key = self.resolve(options)
        return resolve_path(key.year, key.day, ArtifactKind.INPUT, **self._layout())

    def example_path(self, options: ResolvedOptions | None = None) -> Path:
        key = self.resolve(options)
        index = self.resolver.resolve_example_index(options)
        return resolve_path(key.year, key.day, ArtifactKind.EXAMPLE, index, **self._layout())

    def input_text(self, options: ResolvedOptions | None = None) -> str:
        return self.loader.load(self.input_path(options), ArtifactKind.INPUT)

    def example_text(self, options: ResolvedOptions | None = None) -> str:
        return self.loader.load(self.example_path(options), ArtifactKind.EXAMPLE)

    def iter_examples(self, options: ResolvedOptions | None = None) -> Iterator[tuple[int, str]]:
        key = self.resolve(options)
        return self.loader.iter_examples(key.year, key.day, **self._layout())

    def list_examples(self, options: ResolvedOptions | None = None) -> None:
        """Print every example of the resolved puzzle, in index order."""
        stream = self.stream
        for index, text in self.iter_examples(options):
            print(f"Example {index}:", file=stream)
            print(text, file=stream)
            print(file=stream)

    # --- units ---
    def unit(self, options: ResolvedOptions | None = None) -> Any:
        """Return the implementation registered for the resolved puzzle."""
        _, descriptor = self._lookup(options)
        return descriptor.implementation

    def _load(self, key: PuzzleKey, source: InputSource, options: ResolvedOptions | None) -> str:
        if isinstance(source, Explicit):
            return source.text
        layout = self._layout()
        if isinstance(source, FromInput):
            path = resolve_path(key.year, key.day, ArtifactKind.INPUT, **layout)
            return self.loader.load(path, ArtifactKind.INPUT)
        if isinstance(source, FromExample):
            index = source.index if source.index is not None else self.resolver.resolve_example_index(options)
            path = resolve_path(key.year, key.day, ArtifactKind.EXAMPLE, index, **layout)
            return self.loader.load(path, ArtifactKind.EXAMPLE)
        raise TypeError(f"Unsupported input source: {source!r}")

    def invoke_operation(
        self,
        operation: Operation | str,
        source: InputSource,
        options: ResolvedOptions | None = None,
    ) -> Any:
        operation = Operation(operation)
        key, descriptor = self._lookup(options)
        if not supports(descriptor.implementation, operation):
            raise OperationNotImplementedError(key.year, key.day, operation.value)
        raw_input = self._load(key, source, options)
        timed = self.resolver.resolve_timing(options)
        logger.debug("Invoking %s.%s (timed=%s)", descriptor.name, operation.value, timed)
        fn = getattr(descriptor.implementation, operation.value)
        return call_unit(fn, raw_input, timed=timed, echo=self.stream).value


__all__ = ["Dispatcher", "Explicit", "FromExample", "FromInput", "InputSource"]
