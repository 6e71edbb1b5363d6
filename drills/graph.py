"""Graphs as adjacency lists and matrices, with breadth- and depth-first walks."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable
from dataclasses import dataclass


def _format_line(node: object, items: Iterable[str]) -> str:
    return f"{node} :" + "".join(f" {item}" for item in items)


class Graph:
    """Directed graph over hashable nodes, stored as an adjacency list.

    Each edge is kept once; adding an existing edge again has no effect.
    """

    def __init__(self, nodes: int = 0) -> None:
        if nodes < 0:
            raise ValueError("the number of nodes must not be negative")
        self._adjacency: dict[Hashable, list[Hashable]] = {
            node: [] for node in range(nodes)
        }

    def _targets(self, node: Hashable) -> list[Hashable]:
        try:
            return self._adjacency[node]
        except KeyError:
            raise KeyError(f"node {node!r} does not exist") from None

    def add_node(self, node: Hashable) -> None:
        """Add ``node`` with no edges; an existing node is left as it is."""
        self._adjacency.setdefault(node, [])

    def add_edge(self, src: Hashable, dst: Hashable) -> None:
        """Add the edge ``src -> dst``; raise KeyError if ``src`` is unknown."""
        targets = self._targets(src)
        if dst not in targets:
            targets.append(dst)

    def remove_node(self, node: Hashable) -> None:
        """Remove ``node`` and every edge that points to it."""
        self._adjacency.pop(node, None)
        for targets in self._adjacency.values():
            if node in targets:
                targets.remove(node)

    def remove_edge(self, src: Hashable, dst: Hashable) -> None:
        """Remove the edge ``src -> dst``; raise KeyError if there is none."""
        targets = self._targets(src)
        try:
            targets.remove(dst)
        except ValueError:
            raise KeyError(f"no edge {src!r} -> {dst!r}") from None

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Targets of the edges leaving ``node``, in the order they were added."""
        return list(self._targets(node))

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Nodes reachable from ``start`` in breadth-first order."""
        self._targets(start)
        visited = {start}
        order: list[Hashable] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Depth-first order using a stack; nodes are marked when popped."""
        self._targets(start)
        visited: set[Hashable] = set()
        order: list[Hashable] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            stack.extend(
                neighbour
                for neighbour in self._adjacency.get(node, ())
                if neighbour not in visited
            )
        return order

    def dfs_mark_on_push(self, start: Hashable) -> list[Hashable]:
        """Depth-first order using a stack; nodes are marked when pushed."""
        self._targets(start)
        visited = {start}
        order: list[Hashable] = []
        stack = [start]
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def format(self) -> str:
        """One line per node: ``node : target target ...``."""
        return "\n".join(
            _format_line(node, map(str, targets))
            for node, targets in self._adjacency.items()
        )


@dataclass(frozen=True)
class WeightedEdge:
    """A directed edge carrying a weight."""

    src: Hashable
    dst: Hashable
    weight: int


class WeightedGraph:
    """Directed graph whose adjacency list holds weighted edges."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[WeightedEdge]] = {}

    def add_node(self, node: Hashable) -> None:
        """Add ``node`` with no edges; an existing node is left as it is."""
        self._adjacency.setdefault(node, [])

    def add_edge(self, src: Hashable, dst: Hashable, weight: int) -> WeightedEdge:
        """Append an edge ``src -> dst``; ``src`` is added if it is missing."""
        edge = WeightedEdge(src, dst, weight)
        self._adjacency.setdefault(src, []).append(edge)
        return edge

    def edges(self, node: Hashable) -> list[WeightedEdge]:
        """Edges leaving ``node``; raise KeyError for an unknown node."""
        try:
            return list(self._adjacency[node])
        except KeyError:
            raise KeyError(f"node {node!r} does not exist") from None

    def format(self) -> str:
        """One line per node listing each target and the edge weight."""
        return "\n".join(
            _format_line(node, (f"{e.dst} ,weight - {e.weight}" for e in edges))
            for node, edges in self._adjacency.items()
        )


class UndirectedGraph:
    """Undirected graph over the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, node: int) -> list[int]:
        """Vertices adjacent to ``node``, in the order the edges were added."""
        self._check(node)
        return list(self._adjacency[node])

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def format(self) -> str:
        """One line per vertex: ``vertex : neighbour neighbour ...``."""
        return "\n".join(
            _format_line(vertex, map(str, targets))
            for vertex, targets in enumerate(self._adjacency)
        )


class AdjacencyMatrix:
    """Directed graph over ``0 .. vertices - 1`` stored as a 0/1 matrix."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self.vertices = vertices
        self._matrix = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Mark the edge ``u -> v``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.vertices:
                raise IndexError(f"vertex {vertex} is out of range")
        self._matrix[u][v] = 1

    def rows(self) -> list[list[int]]:
        """A copy of the matrix, one row per source vertex."""
        return [list(row) for row in self._matrix]

    def format(self) -> str:
        """One line per vertex: ``vertex : 0 1 ...``."""
        return "\n".join(
            _format_line(vertex, map(str, row))
            for vertex, row in enumerate(self._matrix)
        )