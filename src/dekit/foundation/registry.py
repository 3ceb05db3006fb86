"""
Named-component registry used for operator lookup by configuration name.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Map of names to components (operator classes or factories).

    ``register`` works as a plain call or as a decorator.
    """

    def __init__(self, name: str = "Registry") -> None:
        self._name = name
        self._items: dict[str, T] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str, item: T | None = None, *, override: bool = False) -> Callable[[T], T] | T:
        """
        Register ``item`` under ``key``.

        Args:
            key: Unique name for the item.
            item: The item to register. If None, a decorator is returned.
            override: Replace an existing entry instead of raising ValueError.
        """

        def _do_register(obj: T) -> T:
            if key in self._items and not override:
                raise ValueError(f"Key '{key}' already exists in registry '{self._name}'")
            self._items[key] = obj
            return obj

        if item is None:
            return _do_register
        return _do_register(item)

    def get(self, key: str, default: Any = ...) -> T:
        if key not in self._items:
            if default is not ...:
                return default
            raise KeyError(f"Key '{key}' not found in registry '{self._name}'")
        return self._items[key]

    def list(self) -> list[str]:
        """Return a sorted list of registered keys."""
        return sorted(self._items.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry"]
