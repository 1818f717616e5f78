"""
Algorithm adapters for airline routing.
"""

from src.airline_router.adapters.algorithms.mst_adapter import (
    KruskalTreeBuilder,
    PrimTreeBuilder,
    builders_by_name,
    default_builders,
)
from src.airline_router.adapters.algorithms.route_adapter import (
    LabelCorrectingRouteFinder,
)

__all__ = [
    "LabelCorrectingRouteFinder",
    "PrimTreeBuilder",
    "KruskalTreeBuilder",
    "builders_by_name",
    "default_builders",
]
