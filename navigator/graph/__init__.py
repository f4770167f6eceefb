"""Graph storage and path-finding for the city network.

This subpackage contains the in-memory graph and the Dijkstra
shortest-path algorithm that runs on top of it.
"""

from .dijkstra import dijkstra
from .store import GraphStore

__all__ = ["GraphStore", "dijkstra"]
