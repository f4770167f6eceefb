"""Folium map renderer adapter.

Node coordinates are canvas pixels (y grows downward), so the map
uses Folium's ``Simple`` CRS without tiles and places each node at
``[-y, x]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

import folium

from ...domain.errors import RenderingError
from ...domain.models import Edge, Node

NODE_COLOR = "#1f4e79"
EDGE_COLOR = "#bbbbbb"
ROUTE_COLOR = "crimson"


def _point(node: Node) -> List[float]:
    return [-node.y, node.x]


@dataclass
class FoliumMapRenderer:
    """Folium-based renderer of the city graph.

    Implements MapRendererPort and writes a standalone HTML file.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        path: Sequence[str],
        output_path: Path,
    ) -> Path:
        """Render the graph, and the route if any, and save to file.

        Edges or route stops that reference a node missing from
        ``nodes`` are skipped.

        Raises:
            RenderingError: If there is nothing to draw or saving fails.
        """
        if not nodes:
            raise RenderingError(
                "Cannot render an empty graph",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering graph map",
            extra={
                "nodes": len(nodes),
                "edges": len(edges),
                "stops": len(path),
                "output_path": str(output_path),
            },
        )

        try:
            m = self.build_map(nodes, edges, path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path

    def build_map(
        self,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        path: Sequence[str],
    ) -> folium.Map:
        by_id: Dict[str, Node] = {node.id: node for node in nodes}
        xs = [node.x for node in nodes]
        ys = [node.y for node in nodes]

        m = folium.Map(
            location=[-(min(ys) + max(ys)) / 2, (min(xs) + max(xs)) / 2],
            zoom_start=0,
            crs="Simple",
            tiles=None,
        )
        m.fit_bounds([[-max(ys), min(xs)], [-min(ys), max(xs)]])

        for edge in edges:
            a, b = by_id.get(edge.source), by_id.get(edge.target)
            if a is None or b is None:
                continue
            folium.PolyLine(
                [_point(a), _point(b)], color=EDGE_COLOR, weight=1
            ).add_to(m)
            folium.Marker(
                location=[-(a.y + b.y) / 2, (a.x + b.x) / 2],
                icon=folium.DivIcon(
                    html=f"<div>{edge.weight}</div>", class_name="edge-weight"
                ),
            ).add_to(m)

        stops = [by_id[node_id] for node_id in path if node_id in by_id]
        if len(stops) >= 2:
            folium.PolyLine(
                [_point(node) for node in stops],
                color=ROUTE_COLOR,
                weight=4,
                opacity=0.9,
            ).add_to(m)

        on_route = {node.id for node in stops}
        for node in nodes:
            color = ROUTE_COLOR if node.id in on_route else NODE_COLOR
            folium.CircleMarker(
                location=_point(node),
                radius=5,
                color=color,
                fill=True,
                fill_color=color,
                tooltip=node.id,
            ).add_to(m)

        return m
