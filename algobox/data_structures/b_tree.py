"""A B-tree of ordered keys supporting insertion and search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any


class _Node:
    __slots__ = ("keys", "children")

    def __init__(self, keys: list[Any] | None = None, children: list[_Node] | None = None) -> None:
        self.keys: list[Any] = keys if keys is not None else []
        self.children: list[_Node] = children if children is not None else []

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BTree:
    """A B-tree whose nodes hold at most ``2 * branch_factor - 1`` keys."""

    def __init__(self, branch_factor: int) -> None:
        if branch_factor < 1:
            raise ValueError(f"branch_factor must be at least 1, got {branch_factor}")
        self._degree = 2 * branch_factor
        self._max_keys = self._degree - 1
        self._mid = (self._degree - 1) // 2
        self._root = _Node()

    def _is_full(self, node: _Node) -> bool:
        return len(node.keys) == self._max_keys

    def _split_child(self, parent: _Node, index: int) -> None:
        child = parent.children[index]
        middle = child.keys[self._mid]
        right = _Node(child.keys[self._mid + 1 :])
        del child.keys[self._mid :]
        if not child.is_leaf:
            right.children = child.children[self._mid + 1 :]
            del child.children[self._mid + 1 :]
        parent.keys.insert(index, middle)
        parent.children.insert(index + 1, right)

    def insert(self, key: Any) -> None:
        """Insert ``key``; duplicates are kept."""
        if self._is_full(self._root):
            self._root = _Node(children=[self._root])
            self._split_child(self._root, 0)
        node = self._root
        while True:
            index = bisect_left(node.keys, key)
            if node.is_leaf:
                node.keys.insert(index, key)
                return
            if self._is_full(node.children[index]):
                self._split_child(node, index)
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]

    def search(self, key: Any) -> bool:
        """Return True if ``key`` is stored in the tree."""
        node = self._root
        while True:
            index = bisect_right(node.keys, key)
            if index > 0 and node.keys[index - 1] == key:
                return True
            if node.is_leaf:
                return False
            node = node.children[index]

    def _render(self, node: _Node, depth: int) -> str:
        if node.is_leaf:
            return f" {'{' * depth}{node.keys!r}{'}' * depth} "
        parts = []
        for child, key in zip(node.children, node.keys):
            parts.append(self._render(child, depth + 1))
            parts.append(f"{'{' * depth}{key!r}{'}' * depth}")
        parts.append(self._render(node.children[-1], depth + 1))
        return "".join(parts)

    def traverse(self) -> str:
        """Print the tree in order, nesting depth shown by braces, and return that text."""
        rendered = self._render(self._root, 0)
        print(rendered)
        return rendered