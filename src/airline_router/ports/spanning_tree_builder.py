"""
Spanning Tree Builder port interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.network.tree import Tree
    from src.network.undirected import UndirectedGraph


class SpanningTreeBuilder(ABC):
    """
    Abstract interface for minimum spanning tree algorithms.

    Builders never fail on disconnected input; they return a partial tree.

    Implementations:
    - PrimTreeBuilder
    - KruskalTreeBuilder
    """

    @abstractmethod
    def build(self, ug: UndirectedGraph) -> Tree:
        """Build a fresh tree from the undirected projection."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier used for lookup (e.g. 'prim')."""
        ...
