"""
Graph Repository port interface.

Defines how services obtain the airline graph and its undirected
projection without knowing where the data comes from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.network.graph import Graph
    from src.network.undirected import UndirectedGraph


class GraphNotInitializedError(Exception):
    """Raised when the graph cannot be built on first access."""

    pass


@runtime_checkable
class NetworkSource(Protocol):
    """
    Protocol for graph access.

    Both the directed graph and its projection are built once and then
    treated as read-only by every consumer.
    """

    def get_graph(self) -> Graph:
        """
        Get the airline graph, building it on first access.

        Raises:
            GraphNotInitializedError: If the first build fails.
        """
        ...

    def get_undirected(self) -> UndirectedGraph:
        """
        Get the undirected projection of the current graph.
        """
        ...

    def invalidate(self) -> None:
        """
        Drop the cached graph and projection, forcing a rebuild.
        """
        ...
