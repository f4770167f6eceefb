"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and the
adapters that load the graph, compute routes and draw maps.
"""

from .graph import GraphRepositoryPort, RouteSolverPort
from .rendering import MapRendererPort

__all__ = [
    "GraphRepositoryPort",
    "RouteSolverPort",
    "MapRendererPort",
]
