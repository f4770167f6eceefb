"""Top-level package for the City Navigator project.

The package holds a static, undirected weighted graph of points of
interest and the routing logic that answers shortest-path queries
over it. Transports (HTTP, UI) sit outside the package and talk to
``navigator.services.NavigatorService``.
"""
