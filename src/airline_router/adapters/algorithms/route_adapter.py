"""
Route finder adapter - bridge between the service layer and the
shortest-path engine in src.network.pathing.
"""

from src.airline_router.ports.route_finder import RouteFinder
from src.network.graph import Graph
from src.network.pathing import Paths, find_paths_from, find_paths_with_n_stops


class LabelCorrectingRouteFinder(RouteFinder):
    """
    Shortest-distance search with linear-scan frontier selection.

    Cost is accumulated along the shortest-distance route, it is not
    minimised on its own.
    """

    @property
    def name(self) -> str:
        return "Label-Correcting Dijkstra"

    def find_paths(self, graph: Graph, origin: str) -> Paths:
        return find_paths_from(graph, origin)

    def find_paths_with_stops(
        self, graph: Graph, origin: str, destination: str, stops: int
    ) -> Paths:
        return find_paths_with_n_stops(graph, origin, destination, stops)
