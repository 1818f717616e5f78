"""
Single-source shortest routes over the airline graph.

The search is a Dijkstra variant that selects the next airport with a
linear scan instead of a priority queue. Ties between airports with the
same tentative distance are broken by airport code, so results do not
depend on dict ordering.

Airports with no departing flights (terminal airports) are never selected
as the current airport. They still receive distance labels when a flight
reaches them, so routes to them are reported normally.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from .exceptions import UnknownAirportError
from .graph import Graph
from .validation import validate_airport_exists, validate_stops

logger = logging.getLogger(__name__)

INF = math.inf


@dataclass(frozen=True)
class Path:
    """
    A route reconstructed from a search result.

    Attributes:
        airports: Airport codes from origin to destination (inclusive).
        distance: Accumulated distance along the route.
        cost: Accumulated cost along the route.
    """

    airports: Tuple[str, ...]
    distance: int
    cost: int

    @property
    def origin(self) -> str:
        return self.airports[0]

    @property
    def destination(self) -> str:
        return self.airports[-1]

    @property
    def hops(self) -> int:
        """Number of flights taken."""
        return len(self.airports) - 1

    @property
    def stops(self) -> int:
        """Number of intermediate airports."""
        return max(len(self.airports) - 2, 0)


@dataclass(frozen=True)
class Paths:
    """
    Immutable snapshot of one shortest-path search.

    Holds plain codes and copied labels only. Airports that were never
    reached have an infinite distance and no predecessor.

    Attributes:
        origin: Code of the airport the search started from.
        distances: Best distance per airport.
        costs: Cost accumulated along the best-distance route per airport.
        predecessors: Previous airport on the best route (reached airports
            other than the origin only).
        by_state: Copy of the graph's state index at search time.
    """

    origin: str
    distances: Mapping[str, float]
    costs: Mapping[str, float]
    predecessors: Mapping[str, str]
    by_state: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def _check(self, code: str) -> None:
        if code not in self.distances:
            raise UnknownAirportError(code, "search result")

    def is_reachable(self, code: str) -> bool:
        self._check(code)
        return code == self.origin or code in self.predecessors

    def distance_to(self, code: str) -> float:
        self._check(code)
        return self.distances[code]

    def cost_to(self, code: str) -> float:
        self._check(code)
        return self.costs[code]

    def path_to(self, code: str) -> Optional[Path]:
        """
        Reconstruct the best route from the origin to an airport.

        Returns:
            The route, or None if the airport was not reached. The origin
            itself yields a single-airport route of distance and cost 0.

        Raises:
            UnknownAirportError: If the code was not part of the search.
        """
        if not self.is_reachable(code):
            return None

        route: List[str] = [code]
        current = code
        while current in self.predecessors:
            current = self.predecessors[current]
            route.append(current)
        route.reverse()

        return Path(
            airports=tuple(route),
            distance=int(self.distances[code]),
            cost=int(self.costs[code]),
        )

    def paths_to_state(self, state: str) -> Dict[str, Path]:
        """
        Best routes to every reachable airport of a state.

        Unreachable airports are skipped. An unknown state yields an empty
        mapping. Order follows the state's bucket.
        """
        out: Dict[str, Path] = {}
        for code in self.by_state.get(state, ()):
            path = self.path_to(code)
            if path is not None:
                out[code] = path
        return out

    # Graph-theory alias
    paths_to_region = paths_to_state


def _init_labels(graph: Graph, origin: str) -> Tuple[Dict[str, float], Dict[str, float]]:
    dist = {code: (0 if code == origin else INF) for code in graph.codes()}
    cost = dict(dist)
    return dist, cost


def _next_current(
    graph: Graph, dist: Mapping[str, float], visited: Mapping[str, bool]
) -> Optional[str]:
    """
    Unvisited, non-terminal airport with the smallest finite distance.

    Ties go to the smallest code. None when no such airport remains.
    """
    best: Optional[str] = None
    best_dist = INF
    for code, d in dist.items():
        if visited[code] or d == INF or graph.is_terminal(code):
            continue
        if d < best_dist or (d == best_dist and best is not None and code < best):
            best = code
            best_dist = d
    return best


def find_paths_from(graph: Graph, origin: str) -> Paths:
    """
    Run the shortest-distance search from an origin airport.

    Args:
        graph: Completed airline graph.
        origin: Code of the departure airport.

    Returns:
        Paths snapshot answering route queries from origin.

    Raises:
        UnknownAirportError: If origin is not in the graph.
    """
    validate_airport_exists(origin, graph, "graph (origin)")

    dist, cost = _init_labels(graph, origin)
    visited = {code: False for code in dist}
    prev: Dict[str, str] = {}

    current: Optional[str] = origin
    while current is not None:
        for code, flight in graph.neighbors(current).items():
            candidate = dist[current] + flight.distance
            if not visited[code] and candidate < dist[code]:
                dist[code] = candidate
                cost[code] = cost[current] + flight.cost
                prev[code] = current
        visited[current] = True
        current = _next_current(graph, dist, visited)

    logger.debug(
        "Search from %s reached %d of %d airports",
        origin,
        len(prev) + 1,
        len(dist),
    )

    return Paths(
        origin=origin,
        distances=dist,
        costs=cost,
        predecessors=prev,
        by_state=graph.states(),
    )


def find_paths_with_n_stops(
    graph: Graph, origin: str, to: str, stops: int
) -> Paths:
    """
    Shortest-distance search where the target must be reached with exactly
    ``stops`` intermediate airports.

    A flight into ``to`` is only accepted from an airport reached with
    exactly ``stops`` flights. Flights into any other airport relax
    normally. This is "exactly N stops", not "at most N stops".

    Raises:
        UnknownAirportError: If origin or to is not in the graph.
        InvalidStopsError: If stops is negative.
    """
    validate_airport_exists(origin, graph, "graph (origin)")
    validate_airport_exists(to, graph, "graph (destination)")
    validate_stops(stops)

    dist, cost = _init_labels(graph, origin)
    hops = {code: 0 for code in dist}
    visited = {code: False for code in dist}
    prev: Dict[str, str] = {}

    current: Optional[str] = origin
    while current is not None:
        for code, flight in graph.neighbors(current).items():
            candidate = dist[current] + flight.distance
            if not visited[code] and candidate < dist[code]:
                if code != to or hops[current] == stops:
                    dist[code] = candidate
                    cost[code] = cost[current] + flight.cost
                    hops[code] = hops[current] + 1
                    prev[code] = current
        visited[current] = True
        current = _next_current(graph, dist, visited)

    logger.debug(
        "Constrained search %s -> %s with %d stops: %s",
        origin,
        to,
        stops,
        "found" if to in prev else "no route",
    )

    return Paths(
        origin=origin,
        distances=dist,
        costs=cost,
        predecessors=prev,
        by_state=graph.states(),
    )


def find_path_with_n_stops(
    graph: Graph, origin: str, to: str, stops: int
) -> Optional[Path]:
    """
    Route from origin to ``to`` with exactly ``stops`` stops, or None.

    A route from an airport to itself takes no flight and is never
    returned.
    """
    paths = find_paths_with_n_stops(graph, origin, to, stops)
    if to == origin:
        return None
    return paths.path_to(to)
