"""Services layer - Application orchestration.

Available services:
- NavigatorService: Node/edge listings and shortest-path queries
"""

from .navigator import NavigatorService

__all__ = ["NavigatorService"]
