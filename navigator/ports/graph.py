"""Graph ports - Abstractions for graph loading and routing."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for obtaining the seeded graph.

    Implementation: adapters/graph/csv_repository.py

    The repository builds the graph once and hands out the same
    frozen store on every call.
    """

    def load(self) -> GraphStore:
        """Return the frozen city graph."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: GraphStore, source: str, destination: str) -> RouteResult:
        """Find the shortest route, raising when there is none.

        Raises:
            NodeNotFoundError: If either node is unknown.
            NoRouteFoundError: If the nodes are disconnected.
        """
        ...

    def solve_safe(
        self, graph: GraphStore, source: str, destination: str
    ) -> RouteResult:
        """Find the shortest route, returning an empty result when there is none."""
        ...

    def shortest_path(
        self, graph: GraphStore, source: str, destination: str
    ) -> List[str]:
        """Return the node ids of the shortest route, or an empty list."""
        ...
