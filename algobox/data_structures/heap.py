"""A binary heap ordered by a comparison function, consumed by iteration."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any


class Heap:
    """A binary heap; ``comparator(a, b)`` is True when ``a`` should come first.

    Iterating the heap removes and yields its items in priority order.
    """

    def __init__(self, comparator: Callable[[Any, Any], bool]) -> None:
        self._comparator = comparator
        # Slot 0 is unused so that parent and child positions are i // 2 and 2 * i.
        self._items: list[Any] = [None]

    def __len__(self) -> int:
        return len(self._items) - 1

    def is_empty(self) -> bool:
        """Return True if the heap holds no items."""
        return len(self) == 0

    def add(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        items = self._items
        items.append(value)
        position = len(self)
        while position // 2 > 0:
            parent = position // 2
            if self._comparator(items[position], items[parent]):
                items[position], items[parent] = items[parent], items[position]
            position = parent

    def _preferred_child(self, position: int) -> int:
        left = 2 * position
        right = left + 1
        if right > len(self):
            return left
        return left if self._comparator(self._items[left], self._items[right]) else right

    def __iter__(self) -> Heap:
        return self

    def __next__(self) -> Any:
        if self.is_empty():
            raise StopIteration
        items = self._items
        top = items[1]
        last = items.pop()
        if len(items) > 1:
            items[1] = last
            position = 1
            while 2 * position <= len(self):
                child = self._preferred_child(position)
                if not self._comparator(items[position], items[child]):
                    items[position], items[child] = items[child], items[position]
                position = child
        return top


def min_heap() -> Heap:
    """Return a heap that yields the smallest item first."""
    return Heap(operator.lt)


def max_heap() -> Heap:
    """Return a heap that yields the largest item first."""
    return Heap(operator.gt)