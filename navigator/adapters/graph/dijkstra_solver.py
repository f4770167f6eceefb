"""Dijkstra path finder adapter.

This adapter wraps ``navigator.graph.dijkstra`` and adds:
- Domain model output (RouteResult)
- A strict API that tells unknown nodes and disconnected nodes apart
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.errors import NodeNotFoundError, NoRouteFoundError
from ...domain.models import RouteResult
from ...graph.dijkstra import dijkstra
from ...graph.store import GraphStore


@dataclass
class DijkstraPathFinder:
    """Route solver using Dijkstra's shortest path algorithm.

    Implements RouteSolverPort. Holds no per-query state, so one
    instance can serve concurrent queries.

    Attributes:
        max_expansions: Optional cap on settled nodes per query
    """

    max_expansions: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: GraphStore, source: str, destination: str) -> RouteResult:
        """Find the shortest route between two nodes.

        Args:
            graph: The city graph.
            source: Source node id.
            destination: Destination node id.

        Returns:
            RouteResult with path and total weight.

        Raises:
            NodeNotFoundError: If source or destination is not in the graph.
            NoRouteFoundError: If no path exists.
            SearchLimitExceededError: If the expansion cap is hit.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        for node_id in (source, destination):
            if not graph.has_node(node_id):
                raise NodeNotFoundError(
                    f"Node not in graph: {node_id}",
                    node_id=node_id,
                )

        path, total = dijkstra(graph, source, destination, self.max_expansions)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": len(path),
                "total_weight": total,
            },
        )
        return RouteResult(path=tuple(path), total_weight=total)

    def solve_safe(
        self, graph: GraphStore, source: str, destination: str
    ) -> RouteResult:
        """Find the shortest route, returning an empty result on failure.

        Unknown and disconnected nodes both yield an empty RouteResult.
        """
        try:
            return self.solve(graph, source, destination)
        except (NodeNotFoundError, NoRouteFoundError) as e:
            self._logger.debug("Empty route", extra={"reason": e.message})
            return RouteResult(path=())

    def shortest_path(
        self, graph: GraphStore, source: str, destination: str
    ) -> List[str]:
        """Return the node ids of the shortest route, or ``[]``.

        Raises:
            SearchLimitExceededError: If the expansion cap is hit.
        """
        return list(self.solve_safe(graph, source, destination).path)
