"""Typed domain errors for the City Navigator.

All errors inherit from NavigatorError and can optionally wrap a
root cause exception for debugging.

The public ``shortest_path`` contract never raises for unknown or
disconnected nodes; these errors surface only through the strict
solver API and while loading seed data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NavigatorError(Exception):
    """Base error for the navigator domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(NavigatorError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the seed data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphFrozenError(GraphError):
    """A node or edge was added after the graph was frozen."""


@dataclass
class NodeNotFoundError(NavigatorError):
    """Node id not present in the graph.

    Attributes:
        node_id: The id that was not found
    """

    node_id: str = ""


@dataclass
class NoRouteFoundError(NavigatorError):
    """Both nodes exist but no path connects them.

    Attributes:
        source: Source node id
        destination: Destination node id
    """

    source: str = ""
    destination: str = ""


@dataclass
class SearchLimitExceededError(NavigatorError):
    """The search settled more nodes than the configured cap.

    Attributes:
        limit: The configured maximum number of expansions
    """

    limit: int = 0


@dataclass
class RenderingError(NavigatorError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
