"""HTTP transport for the graph registry."""

from .app import create_app

__all__ = ["create_app"]
