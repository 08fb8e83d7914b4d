"""Immutable domain models for the graph registry.

All models are frozen dataclasses with slots. They carry results
between the registry, the path solver and the HTTP layer and have
no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected edge between two integer nodes.

    Attributes:
        u: First endpoint
        v: Second endpoint
    """

    u: int
    v: int

    @classmethod
    def coerce(cls, value: Union["Edge", Tuple[int, int]]) -> "Edge":
        """Build an Edge from an Edge or a ``(u, v)`` pair."""
        if isinstance(value, Edge):
            return value
        u, v = value
        return cls(u=u, v=v)


def as_edges(values: Iterable[Union[Edge, Tuple[int, int]]]) -> Tuple[Edge, ...]:
    """Normalize an iterable of edges or pairs, preserving order."""
    return tuple(Edge.coerce(value) for value in values)


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        graph_id: Identifier of the graph that was searched
        start: Start node
        end: End node
        path: Ordered node identifiers from start to end inclusive
    """

    graph_id: str
    start: int
    end: int
    path: tuple[int, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_nodes(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)

    @property
    def num_hops(self) -> int:
        """Return the number of edges on the path."""
        return max(len(self.path) - 1, 0)


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Size information about a registered graph.

    Attributes:
        graph_id: Registry identifier
        node_count: Number of distinct nodes
        edge_count: Number of edges added, duplicates included
    """

    graph_id: str
    node_count: int
    edge_count: int
