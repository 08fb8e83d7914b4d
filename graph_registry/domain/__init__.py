"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphNotFoundError,
    GraphRegistryError,
    GraphTooLargeError,
    NoPathFoundError,
    RegistryFullError,
)
from .models import Edge, GraphSummary, PathResult, as_edges

__all__ = [
    # Models
    "Edge",
    "GraphSummary",
    "PathResult",
    "as_edges",
    # Errors
    "GraphRegistryError",
    "GraphNotFoundError",
    "NoPathFoundError",
    "RegistryFullError",
    "GraphTooLargeError",
    "ConfigurationError",
]
