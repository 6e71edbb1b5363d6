"""Single-source shortest paths over a weighted directed graph."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable
from itertools import count


class ShortestPathGraph:
    """Directed graph with non-negative edge weights.

    Adding an edge that already exists replaces its weight.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, dict[Hashable, float]] = {}

    def add_node(self, node: Hashable) -> None:
        """Add ``node`` with no edges; an existing node is left as it is."""
        self._adjacency.setdefault(node, {})

    def add_edge(self, src: Hashable, dst: Hashable, weight: float) -> None:
        """Add or reweight the edge ``src -> dst``; both nodes are added."""
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self.add_node(dst)
        self._adjacency.setdefault(src, {})[dst] = weight

    def dijkstra(self, source: Hashable) -> dict[Hashable, float]:
        """Shortest distance from ``source`` to every node.

        Nodes that cannot be reached get ``math.inf``.
        """
        if source not in self._adjacency:
            raise KeyError(f"node {source!r} does not exist")
        distances: dict[Hashable, float] = dict.fromkeys(self._adjacency, math.inf)
        distances[source] = 0
        tie = count()
        heap = [(0, next(tie), source)]
        done: set[Hashable] = set()
        while heap:
            distance, _, node = heapq.heappop(heap)
            if node in done:
                continue
            done.add(node)
            for neighbour, weight in self._adjacency[node].items():
                candidate = distance + weight
                if candidate < distances[neighbour]:
                    distances[neighbour] = candidate
                    heapq.heappush(heap, (candidate, next(tie), neighbour))
        return distances