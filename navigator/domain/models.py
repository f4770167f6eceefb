"""Immutable domain models for the City Navigator.

All models are frozen dataclasses with slots. They carry no behavior
beyond validation and a few convenience properties.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """A named point of interest.

    Attributes:
        id: Unique human-readable name (e.g., 'Connaught Place')
        x: Horizontal display coordinate, used for layout only
        y: Vertical display coordinate, used for layout only
    """

    id: str
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Node id must be a non-empty string")


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected weighted connection between two nodes.

    The orientation of ``source`` and ``target`` is only the order in
    which the edge was declared or first encountered; routing treats
    both directions the same.

    Attributes:
        source: Name of one endpoint
        target: Name of the other endpoint
        weight: Non-negative travel cost (0 when unspecified)
    """

    source: str
    target: str
    weight: int = 0

    def __post_init__(self) -> None:
        if not self.source or not self.target:
            raise ValueError("Edge endpoints must be non-empty strings")
        if self.weight < 0:
            raise ValueError(f"Edge weight must be >= 0, got {self.weight}")

    @property
    def key(self) -> tuple[str, str]:
        """Orientation-free identity of the edge."""
        if self.source <= self.target:
            return self.source, self.target
        return self.target, self.source


@dataclass(frozen=True, slots=True)
class Neighbor:
    """One adjacency entry: a reachable node and the cost to reach it."""

    node: str
    weight: int


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered tuple of node ids from source to destination
        total_weight: Summed edge weight of the path (inf when empty)
    """

    path: tuple[str, ...]
    total_weight: float = math.inf

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the route."""
        return len(self.path)
