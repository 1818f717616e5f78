"""
Minimum spanning trees over the undirected projection.

Two builders share one result type: Prim's algorithm with a linear-scan
minimum search, and Kruskal's algorithm over a disjoint-set forest.
Disconnected inputs produce a partial tree (a spanning forest for
Kruskal, the start vertex's component for Prim), never an error.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .undirected import UndirectedGraph, edge_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeEdge:
    """An edge selected into a spanning tree (a < b)."""

    key: str
    a: str
    b: str
    cost: int


class DisjointSet:
    """
    Union-find with path compression on find.

    There is no union by rank or size, so chains can grow linearly deep on
    adversarial input before compression flattens them.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._parent: Dict[str, str] = {}
        for item in items:
            self._parent[item] = item

    def add(self, item: str) -> None:
        self._parent.setdefault(item, item)

    def find(self, item: str) -> str:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # compress
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: str, b: str) -> bool:
        """
        Merge the sets of a and b.

        Returns:
            False if a and b were already in the same set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._parent


class Tree:
    """
    Minimum spanning tree: edge key -> cost.

    Each build clears the previous contents first.
    """

    def __init__(self) -> None:
        self._edges: Dict[str, int] = {}
        self._endpoints: Dict[str, Tuple[str, str]] = {}

    def clear(self) -> None:
        self._edges.clear()
        self._endpoints.clear()

    def _emit(self, a: str, b: str, cost: int) -> None:
        key = edge_key(a, b)
        self._edges[key] = cost
        self._endpoints[key] = (min(a, b), max(a, b))

    def prim_mst(self, ug: UndirectedGraph) -> "Tree":
        """
        Build the tree with Prim's algorithm.

        Starts from the first vertex of ug.vertices(); minimum-key ties go
        to the vertex that comes first in that order.
        """
        self.clear()
        vertices = ug.vertices()
        if not vertices:
            return self

        adjacency = ug.edges()
        key: Dict[str, float] = {v: math.inf for v in vertices}
        in_mst: Dict[str, bool] = {v: False for v in vertices}
        parent: Dict[str, str] = {}

        key[vertices[0]] = 0

        for _ in range(len(vertices)):
            u: Optional[str] = None
            min_cost = math.inf
            for v in vertices:
                if not in_mst[v] and key[v] < min_cost:
                    min_cost = key[v]
                    u = v
            if u is None:
                break

            in_mst[u] = True
            if u in parent:
                self._emit(parent[u], u, int(key[u]))

            for edge in adjacency[u]:
                if not in_mst[edge.to] and edge.cost < key[edge.to]:
                    key[edge.to] = edge.cost
                    parent[edge.to] = u

        logger.debug("Prim selected %d edges over %d vertices", len(self), len(vertices))
        return self

    def kruskal_mst(self, ug: UndirectedGraph) -> "Tree":
        """
        Build the tree (or forest) with Kruskal's algorithm.

        Edges are taken cheapest first; equal costs keep the
        unique_edges() enumeration order.
        """
        self.clear()
        all_edges = sorted(ug.unique_edges(), key=lambda e: e[2])
        forest = DisjointSet(ug.vertices())

        for a, b, cost in all_edges:
            if forest.union(a, b):
                self._emit(a, b, cost)

        logger.debug("Kruskal selected %d of %d edges", len(self), len(all_edges))
        return self

    def edges(self) -> List[TreeEdge]:
        """Selected edges ordered by key."""
        return [
            TreeEdge(key=k, a=self._endpoints[k][0], b=self._endpoints[k][1], cost=c)
            for k, c in sorted(self._edges.items())
        ]

    def items(self) -> List[Tuple[str, int]]:
        """(key, cost) pairs ordered by key."""
        return sorted(self._edges.items())

    @property
    def total_cost(self) -> int:
        return sum(self._edges.values())

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, key: object) -> bool:
        return key in self._edges


def prim_mst(ug: UndirectedGraph) -> Tree:
    return Tree().prim_mst(ug)


def kruskal_mst(ug: UndirectedGraph) -> Tree:
    return Tree().kruskal_mst(ug)
