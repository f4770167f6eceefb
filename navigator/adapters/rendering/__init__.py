"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumMapRenderer: Folium-based interactive map of the city graph
"""

from .folium_adapter import FoliumMapRenderer

__all__ = ["FoliumMapRenderer"]
