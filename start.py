"""Simple launcher for the city navigator.

Lists the known places, asks for a source and a destination and
prints the shortest route between them. A map of the city with the
route highlighted is saved next to it.
"""

from __future__ import annotations

import sys

from navigator.config import configure_logging, get_config
from navigator.container import get_service


def main() -> None:
    configure_logging()
    service = get_service()

    print("=== City Navigator ===")
    for node in service.list_nodes():
        print(f"- {node['id']}")

    source = input("Source : ").strip()
    destination = input("Destination : ").strip()

    route = service.route(source, destination)
    print(service.format_route(route))
    if route.is_empty:
        sys.exit(1)

    map_path = service.render_map(get_config().map_path, source, destination)
    print(f"Map saved to: {map_path}")


if __name__ == "__main__":
    main()
