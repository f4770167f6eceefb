"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    GraphError,
    GraphFrozenError,
    NavigatorError,
    NodeNotFoundError,
    NoRouteFoundError,
    RenderingError,
    SearchLimitExceededError,
)
from .models import Edge, Neighbor, Node, RouteResult

__all__ = [
    # Models
    "Node",
    "Edge",
    "Neighbor",
    "RouteResult",
    # Errors
    "NavigatorError",
    "GraphError",
    "GraphFrozenError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "SearchLimitExceededError",
    "RenderingError",
]
