"""
Network Repository - cached airline graph infrastructure.

Builds the directed airline graph from a flight DataFrame once, derives its
undirected projection on demand, and serves both read-only until
invalidated.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

import pandas as pd

from src.airline_router.ports.graph_repository import GraphNotInitializedError
from src.network.graph import Graph
from src.network.undirected import UndirectedGraph

if TYPE_CHECKING:
    from src.airline_router.ports.flight_data_provider import FlightDataProvider

logger = logging.getLogger(__name__)


def build_graph(flights_df: pd.DataFrame) -> Graph:
    """
    Build the airline graph from validated flight records.

    Rows are applied in order. Airports are created the first time they are
    seen (their state comes from that row); a repeated (departure, arrival)
    pair is dropped by the graph, so the first row for a pair wins.

    Args:
        flights_df: DataFrame validated against FlightRecordSchema.

    Returns:
        Newly built Graph.
    """
    graph = Graph()
    dropped = 0

    for row in flights_df.itertuples(index=False):
        graph.add_airport(row.departure_airport, row.departure_state)
        graph.add_airport(row.arrival_airport, row.arrival_state)
        if not graph.add_flight(
            row.departure_airport,
            row.arrival_airport,
            int(row.distance),
            int(row.cost),
        ):
            dropped += 1

    if dropped:
        logger.debug("Dropped %d duplicate flights (first row wins)", dropped)

    return graph


class NetworkRepository:
    """
    Lazily built, cached graph and projection.

    Usage:
        >>> provider = CsvFlightDataProvider("data/airports.csv")
        >>> repo = NetworkRepository(provider)
        >>> graph = repo.get_graph()  # built on first call, cached after
    """

    def __init__(self, data_provider: FlightDataProvider) -> None:
        self._provider = data_provider
        self._graph: Optional[Graph] = None
        self._undirected: Optional[UndirectedGraph] = None

    def get_graph(self) -> Graph:
        """
        Get the current graph, building it on first access.

        Raises:
            GraphNotInitializedError: If the build fails.
        """
        if self._graph is not None:
            return self._graph

        start = time.perf_counter()
        try:
            flights_df = self._provider.get_flights_df()
            graph = build_graph(flights_df)
        except Exception as e:
            logger.error("Graph load from %s failed: %s", self._provider.name, e)
            raise GraphNotInitializedError(
                f"Failed to initialize airline graph: {e}"
            ) from e

        self._graph = graph
        logger.info(
            "Graph loaded from %s: %d airports, %d flights in %.3fms",
            self._provider.name,
            len(graph),
            graph.flight_count,
            (time.perf_counter() - start) * 1000,
        )
        return graph

    def get_undirected(self) -> UndirectedGraph:
        """Get the undirected projection, deriving it on first access."""
        if self._undirected is None:
            graph = self.get_graph()
            self._undirected = UndirectedGraph.from_graph(graph)
            logger.info(
                "Undirected projection built: %d airports, %d connections",
                len(self._undirected),
                len(self._undirected.unique_edges()),
            )
        return self._undirected

    def invalidate(self) -> None:
        """Drop the cached graph and projection."""
        self._graph = None
        self._undirected = None

    @property
    def is_initialized(self) -> bool:
        """Check if the graph has been loaded."""
        return self._graph is not None

    @property
    def provider_name(self) -> str:
        return self._provider.name
