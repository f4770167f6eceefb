import math

import pytest

from navigator.domain.errors import GraphFrozenError, SearchLimitExceededError
from navigator.domain.models import Edge, Neighbor, Node
from navigator.graph.dijkstra import dijkstra
from navigator.graph.store import GraphStore


def _triangle() -> GraphStore:
    return GraphStore(
        nodes=[Node("A", 0, 0), Node("B", 10, 0), Node("C", 20, 0)],
        edges=[Edge("A", "B", 5), Edge("B", "C", 3), Edge("A", "C", 10)],
    )


class TestGraphStore:
    """Construction and read accessors of GraphStore."""

    def test_add_node_first_insertion_wins(self):
        graph = GraphStore()
        graph.add_node("A", 1, 2)
        graph.add_node("A", 9, 9)

        assert graph.list_nodes() == [Node("A", 1, 2)]
        assert graph.neighbors("A") == ()

    def test_add_edge_creates_missing_nodes_at_origin(self):
        graph = GraphStore()
        graph.add_node("A", 5, 5)
        graph.add_edge("A", "Z", 4)

        assert graph.get_node("Z") == Node("Z", 0, 0)
        assert [n.id for n in graph.list_nodes()] == ["A", "Z"]

    def test_explicit_node_after_edge_keeps_placeholder(self):
        graph = GraphStore()
        graph.add_edge("A", "B", 1)
        graph.add_node("B", 7, 7)

        assert graph.get_node("B") == Node("B", 0, 0)

    def test_add_edge_is_bidirectional(self):
        graph = GraphStore()
        graph.add_edge("A", "B", 4)

        assert graph.neighbors("A") == (Neighbor("B", 4),)
        assert graph.neighbors("B") == (Neighbor("A", 4),)

    def test_default_weight_is_zero(self):
        graph = GraphStore()
        graph.add_edge("A", "B")

        assert graph.neighbors("A") == (Neighbor("B", 0),)

    def test_duplicate_edges_are_kept(self):
        graph = GraphStore()
        graph.add_edge("A", "B", 5)
        graph.add_edge("B", "A", 1)

        assert graph.neighbors("A") == (Neighbor("B", 5), Neighbor("B", 1))
        assert graph.edge_count == 2

    def test_list_edges_deduplicates_pairs_first_seen_wins(self):
        graph = GraphStore()
        graph.add_edge("A", "B", 5)
        graph.add_edge("B", "A", 1)
        graph.add_edge("B", "C", 2)

        edges = graph.list_edges()

        assert edges == [Edge("A", "B", 5), Edge("B", "C", 2)]
        assert graph.list_edges() == edges

    def test_list_edges_orientation_follows_node_order(self):
        graph = GraphStore(nodes=[Node("Z"), Node("A")])
        graph.add_edge("A", "Z", 3)

        assert graph.list_edges() == [Edge("Z", "A", 3)]

    def test_neighbors_of_unknown_node_is_empty(self):
        assert _triangle().neighbors("nowhere") == ()

    def test_every_listed_node_has_neighbors_defined(self):
        graph = _triangle()
        graph.add_node("D")

        for node in graph.list_nodes():
            assert isinstance(graph.neighbors(node.id), tuple)
        assert graph.neighbors("D") == ()

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            GraphStore().add_edge("A", "B", -1)

    def test_empty_node_id_rejected(self):
        with pytest.raises(ValueError):
            GraphStore().add_node("")

    def test_frozen_store_rejects_mutation(self):
        graph = _triangle()
        graph.freeze()

        with pytest.raises(GraphFrozenError):
            graph.add_node("D")
        with pytest.raises(GraphFrozenError):
            graph.add_edge("A", "B", 1)
        assert graph.is_frozen
        assert len(graph) == 3

    def test_contains_and_iteration(self):
        graph = _triangle()

        assert "A" in graph
        assert "Q" not in graph
        assert list(graph) == ["A", "B", "C"]
        assert graph.node_ids() == ["A", "B", "C"]


def test_dijkstra_prefers_cheaper_indirect_route():
    path, distance = dijkstra(_triangle(), "A", "C")

    assert path == ["A", "B", "C"]
    assert distance == 8


def test_dijkstra_direct_edge():
    graph = GraphStore(edges=[Edge("A", "B", 10)])

    path, distance = dijkstra(graph, "A", "B")

    assert path == ["A", "B"]
    assert distance == 10


def test_dijkstra_same_node():
    path, distance = dijkstra(_triangle(), "A", "A")

    assert path == ["A"]
    assert distance == 0


def test_dijkstra_isolated_node_returns_inf():
    graph = _triangle()
    graph.add_node("D")

    path, distance = dijkstra(graph, "A", "D")

    assert path == []
    assert math.isinf(distance)


def test_dijkstra_unknown_nodes():
    graph = _triangle()

    assert dijkstra(graph, "A", "X") == ([], float("inf"))
    assert dijkstra(graph, "X", "A") == ([], float("inf"))


def test_dijkstra_cheapest_duplicate_wins():
    graph = GraphStore(edges=[Edge("A", "B", 5), Edge("A", "B", 1)])

    path, distance = dijkstra(graph, "A", "B")

    assert path == ["A", "B"]
    assert distance == 1


def test_dijkstra_skips_stale_heap_entries():
    # C is pushed at 10 first, then improved to 2 through B.
    graph = GraphStore(
        edges=[Edge("A", "C", 10), Edge("A", "B", 1), Edge("B", "C", 1), Edge("C", "D", 1)]
    )

    path, distance = dijkstra(graph, "A", "D")

    assert path == ["A", "B", "C", "D"]
    assert distance == 3


def test_dijkstra_zero_weight_edges():
    graph = GraphStore(edges=[Edge("A", "B"), Edge("B", "C"), Edge("A", "C", 1)])

    path, distance = dijkstra(graph, "A", "C")

    assert path == ["A", "B", "C"]
    assert distance == 0


def test_dijkstra_expansion_cap():
    graph = GraphStore(edges=[Edge("A", "B", 1), Edge("B", "C", 1), Edge("C", "D", 1)])

    with pytest.raises(SearchLimitExceededError) as excinfo:
        dijkstra(graph, "A", "D", max_expansions=1)
    assert excinfo.value.limit == 1

    assert dijkstra(graph, "A", "D", max_expansions=3) == (["A", "B", "C", "D"], 3)


def test_dijkstra_equal_cost_tie_keeps_first_settled_predecessor():
    # Both A-B-D and A-C-D cost 2; D is first relaxed from B, and the
    # later equal-cost relaxation from C does not replace it.
    graph = GraphStore(
        edges=[Edge("A", "C", 1), Edge("A", "B", 1), Edge("C", "D", 1), Edge("B", "D", 1)]
    )

    assert dijkstra(graph, "A", "D") == (["A", "B", "D"], 2)


def test_has_node():
    graph = _triangle()

    assert graph.has_node("A")
    assert not graph.has_node("nowhere")
