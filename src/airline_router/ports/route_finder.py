"""
Route Finder port interface.

Defines the abstract contract for shortest-route algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.network.graph import Graph
    from src.network.pathing import Paths


class RouteFinder(ABC):
    """
    Abstract interface for shortest-route algorithms.

    Algorithm adapters receive the full Graph and return a Paths snapshot,
    which answers any number of route queries from the same origin.

    Implementations:
    - LabelCorrectingRouteFinder: linear-scan Dijkstra variant
    """

    @abstractmethod
    def find_paths(self, graph: Graph, origin: str) -> Paths:
        """
        Run an unconstrained search from origin.

        Raises:
            UnknownAirportError: If origin is not in the graph.
        """
        ...

    @abstractmethod
    def find_paths_with_stops(
        self, graph: Graph, origin: str, destination: str, stops: int
    ) -> Paths:
        """
        Run a search in which destination must be reached with exactly
        ``stops`` intermediate airports.

        Raises:
            UnknownAirportError: If origin or destination is not in the graph.
            InvalidStopsError: If stops is negative.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.
        """
        ...
