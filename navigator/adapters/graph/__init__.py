"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Builds the graph from the seed CSV files
- DijkstraPathFinder: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraPathFinder

__all__ = ["CSVGraphRepository", "DijkstraPathFinder"]
