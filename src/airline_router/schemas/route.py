"""
Route result schemas.

Defines the output contract between the routing services and their
consumers (CLI, HTTP API).
"""

from dataclasses import dataclass
from typing import List

from src.network.graph import Graph
from src.network.pathing import Path


@dataclass(frozen=True)
class RouteLeg:
    """
    Immutable representation of a single flight in a route.
    """

    leg_index: int
    departure_airport: str
    arrival_airport: str
    distance: int
    cost: int


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable representation of a complete route.

    The totals come from the search labels; the legs carry the weights of
    the individual flights taken.
    """

    origin: str
    destination: str
    airports: tuple[str, ...]
    legs: tuple[RouteLeg, ...]
    total_distance: int
    total_cost: int

    @property
    def num_legs(self) -> int:
        """Number of flights."""
        return len(self.legs)

    @property
    def num_stops(self) -> int:
        """Number of intermediate airports."""
        return max(len(self.airports) - 2, 0)

    @property
    def route_cities(self) -> List[str]:
        """Ordered list of all airports in route."""
        return list(self.airports)

    @property
    def path(self) -> Path:
        """The route as a network Path (for console formatting)."""
        return Path(
            airports=self.airports,
            distance=self.total_distance,
            cost=self.total_cost,
        )

    @classmethod
    def from_path(cls, path: Path, graph: Graph) -> "RouteResult":
        """
        Factory method to expand a Path into legs.

        Args:
            path: Route reconstructed from a search result.
            graph: Graph the search ran on, used to look up each flight.

        Returns:
            RouteResult with one RouteLeg per flight.
        """
        legs: List[RouteLeg] = []
        for i, (depart, arrive) in enumerate(zip(path.airports, path.airports[1:])):
            flight = graph.neighbors(depart)[arrive]
            legs.append(
                RouteLeg(
                    leg_index=i,
                    departure_airport=depart,
                    arrival_airport=arrive,
                    distance=flight.distance,
                    cost=flight.cost,
                )
            )

        return cls(
            origin=path.origin,
            destination=path.destination,
            airports=path.airports,
            legs=tuple(legs),
            total_distance=path.distance,
            total_cost=path.cost,
        )
