"""
Reading puzzle input and example text from disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

from aocutils.foundation.exceptions import ArtifactMissingError

from .paths import DEFAULT_EXAMPLE_TEMPLATE, ArtifactKind, resolve_path

logger = logging.getLogger(__name__)

ReadFile = Callable[[Path], str]


def default_read_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def strip_trailing_newlines(text: str) -> str:
    """
    Drop trailing newline characters, leaving other whitespace and inner lines untouched.

    >>> strip_trailing_newlines("42\\n\\n")
    '42'
    >>> strip_trailing_newlines("a\\nb\\n")
    'a\\nb'
    >>> strip_trailing_newlines("  x  \\n")
    '  x  '
    """
    return text.rstrip("\n")


class InputLoader:
    """Loads artifact text through an injected file reader."""

    def __init__(self, read_file: ReadFile | None = None, exists: Callable[[Path], bool] | None = None) -> None:
        self._read_file = read_file or default_read_file
        self._exists = exists or Path.is_file

    def exists(self, path: Path) -> bool:
        return self._exists(Path(path))

    def load(self, path: Path, kind: ArtifactKind | str = ArtifactKind.INPUT) -> str:
        """
        Return the text at *path* without its trailing newlines.

        Raises:
            ArtifactMissingError: when *path* does not exist.
            OSError: any other read failure, unchanged.
        """
        path = Path(path)
        if not self.exists(path):
            raise ArtifactMissingError(path, ArtifactKind(kind).value)
        logger.debug("Reading %s", path)
        return strip_trailing_newlines(self._read_file(path))

    def iter_examples(
        self,
        year: int,
        day: int,
        *,
        root: str | Path = ".",
        example_template: str = DEFAULT_EXAMPLE_TEMPLATE,
        **layout,
    ) -> Iterator[tuple[int, str]]:
        """
        Lazily yield ``(index, text)`` for consecutive examples starting at 0.

        Stops at the first missing index; later files after a gap are never visited.
        """
        index = 0
        while True:
            path = resolve_path(
                year,
                day,
                ArtifactKind.EXAMPLE,
                index,
                root=root,
                example_template=example_template,
                **layout,
            )
            if not self.exists(path):
                logger.debug("Example %d of %s/%s not found at %s; stopping", index, year, day, path)
                return
            yield index, self.load(path, ArtifactKind.EXAMPLE)
            index += 1


__all__ = ["InputLoader", "ReadFile", "default_read_file", "strip_trailing_newlines"]
