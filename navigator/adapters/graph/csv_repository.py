"""CSV Graph Repository adapter.

Reads the seed node and edge lists from CSV files, builds a
``GraphStore`` in file order and freezes it. The built store is
cached for the lifetime of the repository.

Expected columns:
- nodes file: ``node_id,x,y``
- edges file: ``source,target,weight``
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Edge, Node
from ...graph.store import GraphStore


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    Implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[GraphStore] = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the city graph from CSV files.

        Returns:
            The frozen graph.

        Raises:
            GraphError: If a file is missing or a row is malformed.
        """
        if self._graph is not None:
            return self._graph

        with self._lock:
            if self._graph is not None:
                return self._graph

            self._logger.debug(
                "Loading graph",
                extra={
                    "nodes_path": str(self.config.nodes_path),
                    "edges_path": str(self.config.edges_path),
                },
            )

            graph = GraphStore()
            self._load_file(self.config.nodes_path, graph, self._add_nodes)
            self._load_file(self.config.edges_path, graph, self._add_edges)
            graph.freeze()

            self._graph = graph
            self._logger.info(
                "Graph loaded",
                extra={"nodes": len(graph), "edges": graph.edge_count},
            )
            return graph

    def _load_file(
        self,
        path: Path,
        graph: GraphStore,
        add_rows: Callable[[GraphStore, Iterator[dict]], None],
    ) -> None:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                add_rows(graph, csv.DictReader(f))
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise GraphError(
                f"Failed to load graph data from {path.name}",
                file_path=str(path),
                cause=e,
            )

    def _add_nodes(self, graph: GraphStore, rows: Iterator[dict]) -> None:
        for node in self._parse_nodes(rows):
            graph.add_node(node.id, node.x, node.y)

    def _add_edges(self, graph: GraphStore, rows: Iterator[dict]) -> None:
        for edge in self._parse_edges(rows):
            graph.add_edge(edge.source, edge.target, edge.weight)

    @staticmethod
    def _parse_nodes(rows: Iterator[dict]) -> Iterator[Node]:
        for row in rows:
            node_id = (row.get("node_id") or "").strip()
            if not node_id:
                continue
            x = (row.get("x") or "").strip()
            y = (row.get("y") or "").strip()
            yield Node(node_id, int(x) if x else 0, int(y) if y else 0)

    @staticmethod
    def _parse_edges(rows: Iterator[dict]) -> Iterator[Edge]:
        for row in rows:
            source = (row.get("source") or "").strip()
            target = (row.get("target") or "").strip()
            if not source or not target:
                continue
            # A blank weight is a zero-cost connection.
            weight = (row.get("weight") or "").strip()
            yield Edge(source, target, int(weight) if weight else 0)

    def clear_cache(self) -> None:
        """Drop the built graph so the next load re-reads the files."""
        with self._lock:
            self._graph = None
        self._logger.debug("Graph cache cleared")
