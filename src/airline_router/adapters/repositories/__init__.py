"""
Repository adapters for airline graph caching.
"""

from src.airline_router.adapters.repositories.network_repo import (
    NetworkRepository,
    build_graph,
)

__all__ = [
    "NetworkRepository",
    "build_graph",
]
