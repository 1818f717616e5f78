"""
Domain services for the Airline Router.

Services orchestrate the interaction between ports (repositories, algorithms)
and domain logic (input validation, result transformation).
"""

from src.airline_router.services.route_service import RouteService
from src.airline_router.services.spanning_tree_service import SpanningTreeService

__all__ = ["RouteService", "SpanningTreeService"]
