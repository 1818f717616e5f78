"""
Undirected projection of the airline graph.

Every pair of airports linked by a flight in either direction becomes a
single undirected connection whose cost is the cheapest of the directed
costs observed. The projection is the input of the MST builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .graph import Graph


def edge_key(a: str, b: str) -> str:
    """
    Key of the unordered pair {a, b}: the two codes concatenated in order.

    Assumes fixed-width codes (three-letter IATA). With variable-width
    codes two different pairs can share a key, e.g. ('AB', 'C') and
    ('A', 'BC').
    """
    return a + b if a < b else b + a


@dataclass
class UndirectedEdge:
    """One side of a symmetric connection: the neighbour and the cost."""

    to: str
    cost: int


class UndirectedGraph:
    """
    Simple undirected graph: airport code -> list of UndirectedEdge.

    Each connection is stored twice, once in each endpoint's bucket, both
    copies carrying the same cost. Treated as immutable once built.
    """

    def __init__(self) -> None:
        self._edges: Dict[str, List[UndirectedEdge]] = {}

    @classmethod
    def from_graph(cls, graph: Graph) -> "UndirectedGraph":
        """
        Build the projection of a completed directed graph in one pass.

        Reciprocal flights u -> v and v -> u collapse to one connection at
        the lower of their two costs.
        """
        ug = cls()
        for code in graph.codes():
            ug._edges[code] = []

        for depart, flight in graph.flights():
            existing = ug._find(depart, flight.destination)
            if existing is not None:
                cost = min(existing.cost, flight.cost)
                existing.cost = cost
                reverse = ug._find(flight.destination, depart)
                reverse.cost = cost
            else:
                ug._edges[depart].append(UndirectedEdge(flight.destination, flight.cost))
                ug._edges[flight.destination].append(UndirectedEdge(depart, flight.cost))

        return ug

    def _find(self, a: str, b: str) -> Optional[UndirectedEdge]:
        for edge in self._edges.get(a, ()):
            if edge.to == b:
                return edge
        return None

    def edges(self) -> Dict[str, List[UndirectedEdge]]:
        """Full adjacency map (copy)."""
        return {
            code: [UndirectedEdge(e.to, e.cost) for e in bucket]
            for code, bucket in self._edges.items()
        }

    def neighbors(self, code: str) -> List[UndirectedEdge]:
        """Connections of one airport; empty for an unknown code."""
        return [UndirectedEdge(e.to, e.cost) for e in self._edges.get(code, ())]

    def vertices(self) -> List[str]:
        """
        Airport codes sorted ascending.

        This is the enumeration order the MST builders use for their start
        vertex and their tie-breaks.
        """
        return sorted(self._edges)

    def unique_edges(self) -> List[Tuple[str, str, int]]:
        """
        Every connection exactly once, as (a, b, cost) with a < b.

        Enumerated in vertices() order, then bucket order.
        """
        seen: Set[str] = set()
        out: List[Tuple[str, str, int]] = []
        for a in self.vertices():
            for edge in self._edges[a]:
                key = edge_key(a, edge.to)
                if key in seen:
                    continue
                seen.add(key)
                out.append((min(a, edge.to), max(a, edge.to), edge.cost))
        return out

    def cost_between(self, a: str, b: str) -> Optional[int]:
        """Cost of the connection a - b, or None if there is none."""
        edge = self._find(a, b)
        return edge.cost if edge is not None else None

    def __contains__(self, code: object) -> bool:
        return code in self._edges

    def __len__(self) -> int:
        return len(self._edges)
