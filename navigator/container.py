"""Application wiring.

Builds the shared ``NavigatorService`` once. The graph is seeded and
frozen inside ``create_service``, before the service is published, so
every query sees a complete, immutable graph.
"""

from __future__ import annotations

import threading
from typing import Optional

from .adapters.graph import CSVGraphRepository, DijkstraPathFinder
from .adapters.rendering import FoliumMapRenderer
from .config import AppConfig, get_config
from .services import NavigatorService


def create_service(config: Optional[AppConfig] = None) -> NavigatorService:
    """Create a service with the default adapters and a loaded graph.

    Args:
        config: Optional configuration override.

    Raises:
        GraphError: If the seed data cannot be loaded.
    """
    config = config or get_config()
    repository = CSVGraphRepository(config.graph)
    repository.load()
    return NavigatorService(
        graph_repository=repository,
        route_solver=DijkstraPathFinder(max_expansions=config.routing.max_expansions),
        map_renderer=FoliumMapRenderer(),
    )


# Global default service (lazy initialized)
_default_service: Optional[NavigatorService] = None
_service_lock = threading.Lock()


def get_service() -> NavigatorService:
    """Get the default application service (creates one if needed)."""
    global _default_service
    if _default_service is None:
        with _service_lock:
            if _default_service is None:
                _default_service = create_service()
    return _default_service


def reset_service() -> None:
    """Reset the default service.

    Call this in tests to ensure a fresh graph.
    """
    global _default_service
    with _service_lock:
        _default_service = None
