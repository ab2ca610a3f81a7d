"""A prefix tree mapping sequences of keys to values."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

_MISSING = object()


class _Node:
    __slots__ = ("children", "value")

    def __init__(self) -> None:
        self.children: dict[Hashable, _Node] = {}
        self.value: Any = _MISSING


class Trie:
    """A trie whose keys are iterables of hashable parts."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, key: Iterable[Hashable], value: Any) -> None:
        """Store ``value`` under the sequence ``key``."""
        node = self._root
        for part in key:
            node = node.children.setdefault(part, _Node())
        node.value = value

    def get(self, key: Iterable[Hashable]) -> Any | None:
        """Return the value stored under ``key``, or None if there is none."""
        node = self._root
        for part in key:
            child = node.children.get(part)
            if child is None:
                return None
            node = child
        return None if node.value is _MISSING else node.value