"""
Port interfaces for the Airline Router.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with data sources and algorithms. This follows
the Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.airline_router.ports.flight_data_provider import FlightDataProvider
from src.airline_router.ports.graph_repository import (
    GraphNotInitializedError,
    NetworkSource,
)
from src.airline_router.ports.route_finder import RouteFinder
from src.airline_router.ports.spanning_tree_builder import SpanningTreeBuilder

__all__ = [
    "FlightDataProvider",
    "GraphNotInitializedError",
    "NetworkSource",
    "RouteFinder",
    "SpanningTreeBuilder",
]
