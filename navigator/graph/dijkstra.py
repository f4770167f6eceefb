"""Shortest-path computation using Dijkstra's algorithm.

Each call keeps its own distance, predecessor and heap state, so
concurrent calls over the same frozen ``GraphStore`` are safe.
"""

import heapq
from typing import Dict, List, Optional, Tuple

from ..domain.errors import SearchLimitExceededError
from .store import GraphStore


def dijkstra(
    graph: GraphStore,
    start: str,
    end: str,
    max_expansions: Optional[int] = None,
) -> Tuple[List[str], float]:
    """Compute the shortest path between two nodes using Dijkstra.

    Parameters
    ----------
    graph:
        The city graph.
    start:
        Name of the source node.
    end:
        Name of the destination node.
    max_expansions:
        Optional cap on the number of settled nodes. ``None`` means
        no cap.

    Returns
    -------
    list[str], float
        The node names from ``start`` to ``end`` (inclusive) and the
        total weight. If either node is unknown or no path exists,
        returns ``([], float("inf"))``.

    Raises
    ------
    SearchLimitExceededError
        If more than ``max_expansions`` nodes are settled before
        reaching ``end``.
    """
    if start not in graph or end not in graph:
        return [], float("inf")

    distances: Dict[str, float] = {node: float("inf") for node in graph}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[float, str]] = [(0, start)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry: a cheaper one already settled this node.
        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        if max_expansions is not None and len(visited) > max_expansions:
            raise SearchLimitExceededError(
                f"Search from {start} to {end} exceeded {max_expansions} expansions",
                limit=max_expansions,
            )

        for neighbor in graph.neighbors(u):
            v = neighbor.node
            if v in visited:
                continue
            new_distance = current_distance + neighbor.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if distances[end] == float("inf"):
        return [], float("inf")

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path, distances[end]
