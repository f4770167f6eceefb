"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- NAV_GRAPH_DATA_DIR=/path/to/data
- NAV_GRAPH_EDGES_FILE=edges.csv
- NAV_ROUTING_MAX_EXPANSIONS=1000
- NAV_LOG_LEVEL=DEBUG
- NAV_OUTPUT_DIR=/tmp/maps
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Seed data configuration.

    Environment variables prefixed with NAV_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    nodes_file: str = "nodes.csv"
    edges_file: str = "edges.csv"

    @property
    def nodes_path(self) -> Path:
        """Full path to nodes CSV file."""
        return self.data_dir / self.nodes_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class RoutingConfig(BaseSettings):
    """Shortest-path search configuration.

    Environment variables prefixed with NAV_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_ROUTING_")

    # None disables the cap; the seed graph is small enough not to need one.
    max_expansions: Optional[int] = Field(default=None, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with NAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.nodes_path)
        print(config.routing.max_expansions)

    Environment variables prefixed with NAV_.
    """

    model_config = SettingsConfigDict(env_prefix="NAV_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)
    map_file: str = "navigator_map.html"

    @property
    def map_path(self) -> Path:
        """Full path of the rendered map."""
        return self.output_dir / self.map_file


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
