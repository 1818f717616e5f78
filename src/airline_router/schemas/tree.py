"""
Spanning tree result schema.
"""

from dataclasses import dataclass

from src.network.tree import Tree, TreeEdge


@dataclass(frozen=True)
class SpanningTreeResult:
    """
    Immutable representation of a minimum spanning tree build.

    Attributes:
        algorithm: Name of the builder that produced the tree.
        edges: Selected edges ordered by key.
        vertex_count: Number of airports in the undirected projection.
    """

    algorithm: str
    edges: tuple[TreeEdge, ...]
    vertex_count: int

    @property
    def total_cost(self) -> int:
        """Sum of the selected edge costs."""
        return sum(edge.cost for edge in self.edges)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def is_spanning(self) -> bool:
        """True if the tree connects every airport (connected projection)."""
        return self.vertex_count == 0 or self.num_edges == self.vertex_count - 1

    @classmethod
    def from_tree(cls, algorithm: str, tree: Tree, vertex_count: int) -> "SpanningTreeResult":
        return cls(
            algorithm=algorithm,
            edges=tuple(tree.edges()),
            vertex_count=vertex_count,
        )
