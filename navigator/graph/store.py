"""In-memory storage for the city graph.

``GraphStore`` owns the nodes and the adjacency lists. The adjacency
lists form a multigraph: declaring the same pair twice keeps two
parallel entries, and routing simply relaxes through the cheaper one.

The store is filled once (from seed records or via ``add_node`` and
``add_edge``) and then frozen; reads after that need no locking.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..domain.errors import GraphFrozenError
from ..domain.models import Edge, Neighbor, Node


class GraphStore:
    """Undirected weighted graph keyed by node name.

    Nodes keep insertion order. Nodes referenced by an edge before
    being declared are created at (0, 0) in the order first seen.
    """

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        edges: Iterable[Edge] = (),
    ) -> None:
        self._nodes: Dict[str, Node] = {}
        self._adjacency: Dict[str, List[Neighbor]] = {}
        self._edge_count = 0
        self._frozen = False

        for node in nodes:
            self.add_node(node.id, node.x, node.y)
        for edge in edges:
            self.add_edge(edge.source, edge.target, edge.weight)

    # -- construction ------------------------------------------------------

    def add_node(self, node_id: str, x: int = 0, y: int = 0) -> Node:
        """Insert a node unless one with the same id already exists.

        The first insertion wins: a later call with different
        coordinates is a no-op.

        Returns:
            The stored node.

        Raises:
            GraphFrozenError: If the store has been frozen.
            ValueError: If ``node_id`` is empty.
        """
        self._check_mutable()
        node = self._nodes.get(node_id)
        if node is None:
            node = Node(node_id, x, y)
            self._nodes[node_id] = node
        self._adjacency.setdefault(node_id, [])
        return node

    def add_edge(self, a: str, b: str, weight: int = 0) -> Edge:
        """Connect ``a`` and ``b`` in both directions.

        Missing endpoints are created at (0, 0). Repeated pairs are
        not deduplicated.

        Raises:
            GraphFrozenError: If the store has been frozen.
            ValueError: If an endpoint is empty or ``weight`` is negative.
        """
        self._check_mutable()
        edge = Edge(a, b, weight)
        self.add_node(a)
        self.add_node(b)
        self._adjacency[a].append(Neighbor(b, weight))
        self._adjacency[b].append(Neighbor(a, weight))
        self._edge_count += 1
        return edge

    def freeze(self) -> None:
        """Reject any further mutation."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; no further nodes or edges")

    # -- queries -----------------------------------------------------------

    def list_nodes(self) -> List[Node]:
        """Return all nodes in insertion order."""
        return list(self._nodes.values())

    def list_edges(self) -> List[Edge]:
        """Return each undirected pair exactly once.

        Nodes are walked in insertion order and each adjacency list in
        insertion order; for a pair declared several times, the first
        entry met in that walk decides the reported orientation and
        weight.
        """
        seen: Set[Tuple[str, str]] = set()
        edges: List[Edge] = []
        for node_id, entries in self._adjacency.items():
            for entry in entries:
                edge = Edge(node_id, entry.node, entry.weight)
                if edge.key in seen:
                    continue
                seen.add(edge.key)
                edges.append(edge)
        return edges

    def neighbors(self, node_id: str) -> Tuple[Neighbor, ...]:
        """Return the adjacency entries of ``node_id`` (empty if unknown)."""
        return tuple(self._adjacency.get(node_id, ()))

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def node_ids(self) -> List[str]:
        return list(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of edges added, parallel duplicates included."""
        return self._edge_count

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"GraphStore(nodes={len(self._nodes)}, edges={self._edge_count}, "
            f"frozen={self._frozen})"
        )
