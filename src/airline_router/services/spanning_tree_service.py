"""
Spanning Tree Service - minimum-cost connectivity over the network.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Dict, List, Optional

from src.airline_router.adapters.algorithms.mst_adapter import default_builders
from src.airline_router.schemas.tree import SpanningTreeResult

if TYPE_CHECKING:
    from src.airline_router.ports.graph_repository import NetworkSource
    from src.airline_router.ports.spanning_tree_builder import SpanningTreeBuilder

logger = logging.getLogger(__name__)


class SpanningTreeService:
    """
    Domain service for minimum spanning trees.

    Trees are built from the undirected projection of the cached graph,
    where reciprocal flights collapse to their cheaper cost.
    """

    def __init__(
        self,
        network: NetworkSource,
        builders: Optional[Dict[str, SpanningTreeBuilder]] = None,
    ) -> None:
        self._network = network
        self._builders = builders if builders is not None else default_builders()

    @property
    def algorithms(self) -> List[str]:
        return sorted(self._builders)

    def minimum_spanning_tree(self, algorithm: str = "prim") -> SpanningTreeResult:
        """
        Build a minimum spanning tree with the named algorithm.

        A disconnected network yields a partial tree, reported through
        SpanningTreeResult.is_spanning.

        Raises:
            ValueError: If the algorithm name is unknown.
        """
        builder = self._builders.get(algorithm.lower())
        if builder is None:
            raise ValueError(
                f"Unknown MST algorithm '{algorithm}', "
                f"expected one of: {', '.join(self.algorithms)}"
            )

        ug = self._network.get_undirected()

        start = time.perf_counter()
        tree = builder.build(ug)
        result = SpanningTreeResult.from_tree(builder.name, tree, len(ug))

        logger.info(
            "%s MST: %d edges, total cost %d in %.3fms",
            builder.name,
            result.num_edges,
            result.total_cost,
            (time.perf_counter() - start) * 1000,
        )
        if not result.is_spanning:
            logger.warning(
                "Network is disconnected: %s tree covers %d edges for %d airports",
                builder.name,
                result.num_edges,
                result.vertex_count,
            )

        return result
