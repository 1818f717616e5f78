"""
AirlineNetwork Use Case - Public API for airline routing.

This module provides the main entry point for the routing engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from src.airline_router.adapters.algorithms.route_adapter import (
    LabelCorrectingRouteFinder,
)
from src.airline_router.adapters.data_providers.csv_provider import (
    CsvFlightDataProvider,
)
from src.airline_router.adapters.repositories.network_repo import NetworkRepository
from src.airline_router.config import Config
from src.airline_router.ports.flight_data_provider import FlightDataProvider
from src.airline_router.ports.route_finder import RouteFinder
from src.airline_router.schemas.route import RouteResult
from src.airline_router.schemas.tree import SpanningTreeResult
from src.airline_router.services.route_service import RouteService
from src.airline_router.services.spanning_tree_service import SpanningTreeService
from src.network.graph import Graph
from src.network.undirected import UndirectedGraph

logger = logging.getLogger(__name__)


class AirlineNetwork:
    """
    Public API for airline routing and connectivity.

    Example usage:
        >>> network = AirlineNetwork("data/airports.csv")
        >>> route = network.shortest_route("ATL", "MIA")
        >>> if route is not None:
        ...     print(route.route_cities, route.total_distance, route.total_cost)
        >>> tree = network.minimum_spanning_tree("kruskal")
        >>> print(tree.total_cost)

    The graph is loaded lazily on the first query.

    Attributes:
        _repository: Graph repository (cache of graph and projection).
        _routes: Underlying RouteService.
        _trees: Underlying SpanningTreeService.
    """

    def __init__(
        self,
        csv_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[FlightDataProvider] = None,
        route_finder: Optional[RouteFinder] = None,
        default_mst_algorithm: Optional[str] = None,
    ) -> None:
        """
        Initialize the network with optional custom dependencies.

        Args:
            csv_path: Path to the flight CSV. Defaults to Config.CSV_PATH.
            data_provider: Custom data provider. If None, uses CsvFlightDataProvider.
            route_finder: Custom algorithm. If None, uses LabelCorrectingRouteFinder.
            default_mst_algorithm: MST algorithm used when none is requested.
                Defaults to Config.DEFAULT_MST_ALGORITHM.
        """
        if data_provider is not None:
            self._data_provider = data_provider
        else:
            csv_path = csv_path or Config.CSV_PATH
            self._data_provider = CsvFlightDataProvider(csv_path)

        self._repository = NetworkRepository(self._data_provider)
        self._route_finder = route_finder or LabelCorrectingRouteFinder()
        self._routes = RouteService(self._repository, self._route_finder)
        self._trees = SpanningTreeService(self._repository)
        self._default_mst_algorithm = (
            default_mst_algorithm or Config.DEFAULT_MST_ALGORITHM
        )

        logger.info(
            "AirlineNetwork initialized with %s data and %s algorithm",
            self._data_provider.name,
            self._route_finder.name,
        )

    # --- Graph access --------------------------------------------------------

    @property
    def graph(self) -> Graph:
        return self._repository.get_graph()

    @property
    def undirected(self) -> UndirectedGraph:
        return self._repository.get_undirected()

    def airports(self) -> List[str]:
        return self._routes.airports()

    def states(self) -> Dict[str, Tuple[str, ...]]:
        return self._routes.states()

    def connections(self) -> List[Tuple[str, int, int, int]]:
        return self._routes.connections()

    # --- Routing -------------------------------------------------------------

    def shortest_route(self, origin: str, destination: str) -> Optional[RouteResult]:
        """
        Shortest-distance route, or None if unreachable.

        Raises:
            UnknownAirportError: If either airport is unknown.
        """
        return self._routes.shortest_route(origin, destination)

    def routes_to_state(self, origin: str, state: str) -> Dict[str, RouteResult]:
        """Shortest routes to every reachable airport of a state."""
        return self._routes.routes_to_state(origin, state)

    def route_with_stops(
        self, origin: str, destination: str, stops: int
    ) -> Optional[RouteResult]:
        """Shortest route with exactly ``stops`` intermediate airports, or None."""
        return self._routes.route_with_stops(origin, destination, stops)

    # --- Connectivity --------------------------------------------------------

    def minimum_spanning_tree(self, algorithm: Optional[str] = None) -> SpanningTreeResult:
        """
        Minimum spanning tree of the undirected projection.

        Args:
            algorithm: 'prim' or 'kruskal'. Defaults to the configured one.

        Raises:
            ValueError: If the algorithm name is unknown.
        """
        return self._trees.minimum_spanning_tree(
            algorithm or self._default_mst_algorithm
        )

    @property
    def mst_algorithms(self) -> List[str]:
        return self._trees.algorithms

    # --- Lifecycle -----------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        """Check if the graph has been loaded."""
        return self._repository.is_initialized

    @property
    def algorithm_name(self) -> str:
        return self._routes.algorithm_name

    def refresh_data(self) -> None:
        """Drop the cached graph; the next query reloads it."""
        self._repository.invalidate()
        logger.info("Network cache invalidated")
