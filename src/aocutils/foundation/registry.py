"""
Generic keyed store used for solution units and their harnesses.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class Registry(Generic[K, T]):
    """
    A small keyed store for named items.

    Duplicate keys are rejected unless ``override=True`` is passed; the error raised on a
    duplicate can be customised through ``on_duplicate`` so callers get domain errors instead
    of a bare ``ValueError``.
    """

    def __init__(
        self,
        name: str = "Registry",
        *,
        on_duplicate: Callable[[K, T, T], Exception] | None = None,
    ) -> None:
        self._name = name
        self._items: dict[K, T] = {}
        self._on_duplicate = on_duplicate

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: K, item: T, *, override: bool = False) -> T:
        """
        Register an item with the given key.

        Args:
            key: The unique key for the item.
            item: The item to register.
            override: If True, overwrite an existing key. If False, raise on duplicates.

        Returns:
            The registered item.
        """
        if key in self._items and not override:
            if self._on_duplicate is not None:
                raise self._on_duplicate(key, self._items[key], item)
            raise ValueError(f"Key '{key}' already exists in registry '{self._name}'")
        self._items[key] = item
        return item

    def find(self, key: K) -> T | None:
        """Return the item for *key*, or None when nothing is registered."""
        return self._items.get(key)

    def get(self, key: K) -> T:
        if key not in self._items:
            raise KeyError(f"Key '{key}' not found in registry '{self._name}'")
        return self._items[key]

    def discard(self, key: K) -> T | None:
        """Remove *key* if present and return the removed item."""
        return self._items.pop(key, None)

    def discard_where(self, predicate: Callable[[T], bool]) -> list[K]:
        """Remove every item matching *predicate*; returns the removed keys."""
        doomed = [key for key, item in self._items.items() if predicate(item)]
        for key in doomed:
            del self._items[key]
        return doomed

    def clear(self) -> None:
        self._items.clear()

    def list(self) -> list[K]:
        """Return a sorted list of registered keys."""
        return sorted(self._items.keys())  # type: ignore[type-var]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: K) -> T:
        return self.get(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def values(self) -> list[T]:
        return list(self._items.values())

    def items(self) -> list[tuple[K, T]]:
        return list(self._items.items())


__all__ = ["Registry"]
