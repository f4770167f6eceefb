"""Rendering port - Abstraction for drawing the city graph.

Implementations draw every node at its display coordinates, every
edge with its weight, and highlight a route when one is given.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Edge, Node


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        path: Sequence[str],
        output_path: Path,
    ) -> Path:
        """Render the graph and save it to file.

        Args:
            nodes: Nodes to draw, with their display coordinates.
            edges: Edges to draw, each labelled with its weight.
            path: Node ids of the route to highlight (may be empty).
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
