"""
Airline network core: graph model, shortest routes and spanning trees.
"""

from src.network.exceptions import (
    EmptyFlightsError,
    InvalidStopsError,
    MissingColumnsError,
    NetworkError,
    UnknownAirportError,
    UnknownVertex,
    ValidationError,
)
from src.network.graph import Airport, Flight, Graph
from src.network.pathing import (
    Path,
    Paths,
    find_path_with_n_stops,
    find_paths_from,
    find_paths_with_n_stops,
)
from src.network.tree import DisjointSet, Tree, TreeEdge, kruskal_mst, prim_mst
from src.network.undirected import UndirectedEdge, UndirectedGraph, edge_key

__all__ = [
    # Graph model
    "Airport",
    "Flight",
    "Graph",
    "UndirectedEdge",
    "UndirectedGraph",
    "edge_key",
    # Shortest routes
    "Path",
    "Paths",
    "find_paths_from",
    "find_paths_with_n_stops",
    "find_path_with_n_stops",
    # Spanning trees
    "DisjointSet",
    "Tree",
    "TreeEdge",
    "prim_mst",
    "kruskal_mst",
    # Errors
    "NetworkError",
    "UnknownAirportError",
    "UnknownVertex",
    "ValidationError",
    "EmptyFlightsError",
    "MissingColumnsError",
    "InvalidStopsError",
]
