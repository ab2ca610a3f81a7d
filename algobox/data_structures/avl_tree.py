"""A sorted set backed by a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "height", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.height = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance_factor(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    _update_height(node)
    pivot.left = node
    _update_height(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    _update_height(node)
    pivot.right = node
    _update_height(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update_height(node)
    factor = _balance_factor(node)
    if factor == 2:
        assert node.right is not None
        if _balance_factor(node.right) == -1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor == -2:
        assert node.left is not None
        if _balance_factor(node.left) == 1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: _Node | None, value: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    if value == node.value:
        return node, False
    if value < node.value:
        node.left, inserted = _insert(node.left, value)
    else:
        node.right, inserted = _insert(node.right, value)
    return (_rebalance(node) if inserted else node), inserted


def _take_min(node: _Node) -> tuple[_Node | None, _Node]:
    """Detach the smallest node; return the remaining subtree and that node."""
    if node.left is None:
        rest = node.right
        node.right = None
        return rest, node
    node.left, smallest = _take_min(node.left)
    return _rebalance(node), smallest


def _merge(left: _Node, right: _Node) -> _Node:
    rest, root = _take_min(right)
    root.left = left
    root.right = rest
    return _rebalance(root)


def _remove(node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value == node.value:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        return _merge(node.left, node.right), True
    if value < node.value:
        node.left, removed = _remove(node.left, value)
    else:
        node.right, removed = _remove(node.right, value)
    return (_rebalance(node) if removed else node), removed


class AVLTree:
    """A set of ordered values kept in a height-balanced binary search tree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._length = 0
        for value in values:
            self.insert(value)

    def contains(self, value: Any) -> bool:
        """Return True if ``value`` is in the tree."""
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return True if it was not present yet."""
        self._root, inserted = _insert(self._root, value)
        if inserted:
            self._length += 1
        return inserted

    def remove(self, value: Any) -> bool:
        """Remove ``value``; return True if it was present."""
        self._root, removed = _remove(self._root, value)
        if removed:
            self._length -= 1
        return removed

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        """Return True if the tree holds no values."""
        return self._length == 0

    def _nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while node is not None:
            stack.append(node)
            node = node.left
        while stack:
            current = stack.pop()
            child = current.right
            while child is not None:
                stack.append(child)
                child = child.left
            yield current

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        return (node.value for node in self._nodes())

    def is_balanced(self) -> bool:
        """Return True if every node's subtrees differ in height by at most one."""
        return all(-1 <= _balance_factor(node) <= 1 for node in self._nodes())