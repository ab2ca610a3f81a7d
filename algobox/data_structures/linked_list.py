"""A doubly linked list that appends at the end and reads by position."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any, prev: _Node | None) -> None:
        self.value = value
        self.prev = prev
        self.next: _Node | None = None


class LinkedList:
    """A doubly linked list of values."""

    def __init__(self) -> None:
        self._start: _Node | None = None
        self._end: _Node | None = None
        self._length = 0

    def add(self, obj: Any) -> None:
        """Append ``obj`` at the end of the list."""
        node = _Node(obj, self._end)
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._length += 1

    def get(self, index: int) -> Any | None:
        """Return the value at ``index``, or None if there is none."""
        if index < 0:
            return None
        for position, value in enumerate(self):
            if position == index:
                return value
        return None

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._start
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)