"""
Route Service - Domain orchestrator for shortest-route queries.

Coordinates the interaction between:
- NetworkSource (cached airline graph)
- RouteFinder (algorithm adapter)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from src.airline_router.schemas.route import RouteResult
from src.network.pathing import Paths
from src.network.validation import validate_airport_exists

if TYPE_CHECKING:
    from src.airline_router.ports.graph_repository import NetworkSource
    from src.airline_router.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteService:
    """
    Domain service for finding shortest flight routes.

    Every query runs a fresh search over the cached graph; search results
    hold no references back into the graph.

    Attributes:
        _network: Source of the cached airline graph.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(self, network: NetworkSource, route_finder: RouteFinder) -> None:
        self._network = network
        self._route_finder = route_finder

    def search(self, origin: str) -> Paths:
        """
        Run an unconstrained search from origin.

        Raises:
            UnknownAirportError: If origin is not in the graph.
        """
        graph = self._network.get_graph()

        start = time.perf_counter()
        paths = self._route_finder.find_paths(graph, origin)
        logger.debug(
            "Search from %s completed in %.3fms",
            origin,
            (time.perf_counter() - start) * 1000,
        )
        return paths

    def shortest_route(self, origin: str, destination: str) -> Optional[RouteResult]:
        """
        Shortest-distance route between two airports.

        Returns:
            The route, or None if destination is unreachable.

        Raises:
            UnknownAirportError: If either airport is not in the graph.
        """
        graph = self._network.get_graph()
        validate_airport_exists(destination, graph, "graph (destination)")

        path = self.search(origin).path_to(destination)
        if path is None:
            logger.info("No route from %s to %s", origin, destination)
            return None

        return RouteResult.from_path(path, graph)

    def routes_to_state(self, origin: str, state: str) -> Dict[str, RouteResult]:
        """
        Shortest routes from origin to every reachable airport of a state.

        Unreachable airports are skipped; an unknown state gives an empty
        mapping.

        Raises:
            UnknownAirportError: If origin is not in the graph.
        """
        graph = self._network.get_graph()
        paths = self.search(origin).paths_to_state(state)

        logger.info(
            "Routes from %s to state %s: %d of %d airports reachable",
            origin,
            state,
            len(paths),
            len(graph.airports_in_state(state)),
        )

        return {code: RouteResult.from_path(path, graph) for code, path in paths.items()}

    def route_with_stops(
        self, origin: str, destination: str, stops: int
    ) -> Optional[RouteResult]:
        """
        Shortest route reaching destination with exactly ``stops`` stops.

        Returns:
            The route, or None if no route has exactly that many stops.

        Raises:
            UnknownAirportError: If either airport is not in the graph.
            InvalidStopsError: If stops is negative.
        """
        graph = self._network.get_graph()

        start = time.perf_counter()
        paths = self._route_finder.find_paths_with_stops(graph, origin, destination, stops)
        logger.debug(
            "Constrained search %s -> %s (%d stops) completed in %.3fms",
            origin,
            destination,
            stops,
            (time.perf_counter() - start) * 1000,
        )

        path = paths.path_to(destination) if destination != origin else None
        if path is None:
            logger.info(
                "No route from %s to %s with %d stops", origin, destination, stops
            )
            return None

        return RouteResult.from_path(path, graph)

    def connections(self) -> List[Tuple[str, int, int, int]]:
        """
        Direct connection counts per airport, busiest first.

        Returns:
            (code, inbound, outbound, total) tuples.
        """
        return self._network.get_graph().connection_counts()

    def airports(self) -> List[str]:
        """All airport codes, sorted."""
        return sorted(self._network.get_graph().codes())

    def states(self) -> Dict[str, Tuple[str, ...]]:
        """State index of the graph."""
        return self._network.get_graph().states()

    @property
    def algorithm_name(self) -> str:
        return self._route_finder.name
