"""Navigator service - Query layer over the city graph.

Maps the three read operations onto plain, wire-ready structures so
that any transport (HTTP handler, CLI, UI callback) can serialize
them directly. A map of the graph, with a route highlighted, can be
rendered through an optional MapRendererPort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..domain.errors import RenderingError
from ..domain.models import RouteResult
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class NavigatorService:
    """Read-only queries over the seeded graph.

    Attributes:
        graph_repository: Provides the frozen graph
        route_solver: Computes shortest paths
        map_renderer: Optional map rendering
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_nodes(self) -> List[Dict[str, Any]]:
        """Return ``{"id", "x", "y"}`` records in insertion order."""
        graph = self.graph_repository.load()
        return [{"id": n.id, "x": n.x, "y": n.y} for n in graph.list_nodes()]

    def list_edges(self) -> List[Dict[str, Any]]:
        """Return ``{"source", "target", "weight"}`` records, one per pair."""
        graph = self.graph_repository.load()
        return [
            {"source": e.source, "target": e.target, "weight": e.weight}
            for e in graph.list_edges()
        ]

    def shortest_path(self, source: str, destination: str) -> List[str]:
        """Return node ids from source to destination inclusive.

        An unknown id and a disconnected pair both return ``[]``.

        Raises:
            SearchLimitExceededError: If a routing cap is configured and
                the search settles more nodes than it allows.
        """
        graph = self.graph_repository.load()
        path = self.route_solver.shortest_path(graph, source, destination)
        self._logger.debug(
            "Shortest path query",
            extra={"source": source, "destination": destination, "stops": len(path)},
        )
        return path

    def route(self, source: str, destination: str) -> RouteResult:
        """Like shortest_path(), with the total weight attached."""
        graph = self.graph_repository.load()
        return self.route_solver.solve_safe(graph, source, destination)

    def format_route(self, route: RouteResult) -> str:
        """Format a route as a human-readable string."""
        if route.is_empty:
            return "No path found"
        return (
            f"Shortest path: {' -> '.join(route.path)}\n"
            f"Total weight: {route.total_weight}"
        )

    def render_map(
        self,
        output_path: Path,
        source: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> Path:
        """Draw every node and weighted edge, highlighting a route.

        The route between ``source`` and ``destination`` is highlighted
        when both are given and a path exists; otherwise only the graph
        is drawn.

        Raises:
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.map_renderer is None:
            raise RenderingError(
                "No map renderer configured",
                output_path=str(output_path),
            )

        graph = self.graph_repository.load()
        path: List[str] = []
        if source is not None and destination is not None:
            path = self.route_solver.shortest_path(graph, source, destination)

        return self.map_renderer.render(
            graph.list_nodes(), graph.list_edges(), path, output_path
        )
