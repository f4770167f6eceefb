"""Adapters layer - Concrete implementations of ports.

- Graph storage (CSV seed files)
- Routing (Dijkstra)
- Rendering (Folium)
"""
