"""Insertion-ordered set used as the graph adjacency representation."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass
class OrderedSet(Generic[T]):
    """Set that iterates in first-insertion order.

    Elements are never removed, so iteration order is stable for the lifetime
    of the set.
    """

    _items: list[T] = field(default_factory=list)
    _index: set[T] = field(default_factory=set)

    def insert(self, value: T) -> bool:
        if value in self._index:
            return False
        self._index.add(value)
        self._items.append(value)
        return True

    def copy(self) -> OrderedSet[T]:
        return OrderedSet(list(self._items), set(self._index))

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"
