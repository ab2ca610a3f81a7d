"""Weighted directed and undirected graphs keyed by node name."""

from __future__ import annotations


class NodeNotInGraphError(KeyError):
    """Raised when a node that is not in the graph is accessed."""

    def __str__(self) -> str:
        return "accessing a node that is not in the graph"


class Graph:
    """A weighted graph stored as an adjacency table; edges are directed."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[tuple[str, int]]] = {}

    def add_node(self, node: str) -> bool:
        """Add ``node``; return True if it was not in the graph yet."""
        if node in self._adjacency:
            return False
        self._adjacency[node] = []
        return True

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        """Add an edge ``(from, to, weight)``, creating missing nodes."""
        source, target, weight = edge
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append((target, weight))

    def neighbours(self, node: str) -> list[tuple[str, int]]:
        """Return the ``(node, weight)`` pairs reachable from ``node``."""
        try:
            return list(self._adjacency[node])
        except KeyError:
            raise NodeNotInGraphError(node) from None

    def contains(self, node: str) -> bool:
        """Return True if ``node`` is in the graph."""
        return node in self._adjacency

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def nodes(self) -> set[str]:
        """Return the set of node names."""
        return set(self._adjacency)

    def edges(self) -> list[tuple[str, str, int]]:
        """Return every edge as ``(from, to, weight)``."""
        return [
            (source, target, weight)
            for source, targets in self._adjacency.items()
            for target, weight in targets
        ]


class DirectedGraph(Graph):
    """A weighted graph whose edges go one way."""


class UndirectedGraph(Graph):
    """A weighted graph whose edges go both ways."""

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        """Add an edge between two nodes in both directions."""
        source, target, weight = edge
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append((target, weight))
        self._adjacency[target].append((source, weight))