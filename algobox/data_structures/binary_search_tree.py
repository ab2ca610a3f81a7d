"""An unbalanced binary search tree of ordered values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; equal values are stored to the right."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def search(self, value: Any) -> bool:
        """Return True if ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def insert(self, value: Any) -> None:
        """Insert ``value`` at its place in the tree."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right

    def minimum(self) -> Any | None:
        """Return the smallest value, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any | None:
        """Return the largest value, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def floor(self, value: Any) -> Any | None:
        """Return the largest stored value not greater than ``value``, or None."""
        best = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            if node.value > value:
                node = node.left
            else:
                best = node.value
                node = node.right
        return best

    def ceil(self, value: Any) -> Any | None:
        """Return the smallest stored value not less than ``value``, or None."""
        best = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            if node.value < value:
                node = node.right
            else:
                best = node.value
                node = node.left
        return best

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            current = stack.pop()
            yield current.value
            node = current.right