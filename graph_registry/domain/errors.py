"""Typed domain errors for the graph registry.

The graph and registry layers report missing entries and unreachable
targets as ``(value, found)`` results. The service layer turns those
outcomes into the typed errors below so each caller can handle them
explicitly.

All errors inherit from GraphRegistryError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GraphRegistryError(Exception):
    """Base error for the graph registry domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphNotFoundError(GraphRegistryError):
    """No registry entry exists for the requested identifier.

    Attributes:
        graph_id: The identifier that was looked up
    """

    graph_id: str = ""


@dataclass
class NoPathFoundError(GraphRegistryError):
    """The end node is unreachable from the start node.

    Kept separate from GraphNotFoundError: the graph exists, the
    traversal simply exhausted its frontier.

    Attributes:
        graph_id: Identifier of the graph that was searched
        start: Start node
        end: End node
    """

    graph_id: str = ""
    start: Optional[int] = None
    end: Optional[int] = None


@dataclass
class RegistryFullError(GraphRegistryError):
    """The registry reached its configured maximum number of graphs.

    Attributes:
        max_graphs: The configured limit
    """

    max_graphs: int = 0


@dataclass
class GraphTooLargeError(GraphRegistryError):
    """An edge list exceeds the configured per-graph limit.

    Attributes:
        edge_count: Number of edges submitted
        max_edges: The configured limit
    """

    edge_count: int = 0
    max_edges: int = 0


@dataclass
class ConfigurationError(GraphRegistryError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
