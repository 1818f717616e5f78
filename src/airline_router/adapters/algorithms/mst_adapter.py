"""
Spanning tree adapters - Prim and Kruskal builders behind one port.
"""

from typing import Dict, Iterable

from src.airline_router.ports.spanning_tree_builder import SpanningTreeBuilder
from src.network.tree import Tree
from src.network.undirected import UndirectedGraph


class PrimTreeBuilder(SpanningTreeBuilder):
    """Prim's algorithm, started from the smallest airport code."""

    @property
    def name(self) -> str:
        return "prim"

    def build(self, ug: UndirectedGraph) -> Tree:
        return Tree().prim_mst(ug)


class KruskalTreeBuilder(SpanningTreeBuilder):
    """Kruskal's algorithm over a path-compressed disjoint-set forest."""

    @property
    def name(self) -> str:
        return "kruskal"

    def build(self, ug: UndirectedGraph) -> Tree:
        return Tree().kruskal_mst(ug)


def default_builders() -> Dict[str, SpanningTreeBuilder]:
    """Builders keyed by name."""
    return builders_by_name([PrimTreeBuilder(), KruskalTreeBuilder()])


def builders_by_name(builders: Iterable[SpanningTreeBuilder]) -> Dict[str, SpanningTreeBuilder]:
    return {builder.name: builder for builder in builders}
