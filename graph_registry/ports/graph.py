"""Graph ports - Abstractions for graph storage and routing.

These protocols define the contracts between the graph service and
the registry / solver implementations.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Tuple,
    Union,
)

if TYPE_CHECKING:
    from ..domain.models import Edge, PathResult
    from ..graph import Graph

EdgeLike = Union["Edge", Tuple[int, int]]


class GraphRegistryPort(Protocol):
    """Port for storing graphs under opaque identifiers.

    Implementation: adapters/registry/memory_registry.py

    Identifiers are strings of a monotonically increasing counter and
    are never reused for the lifetime of the registry.
    """

    def create(self, edges: Iterable[EdgeLike]) -> str:
        """Build a graph from ``edges`` and register it.

        Args:
            edges: Edges to add, in order.

        Returns:
            The newly assigned identifier.
        """
        ...

    def lookup(self, graph_id: str) -> Tuple[Optional[Graph], bool]:
        """Return the registered graph and whether it exists.

        Args:
            graph_id: Identifier returned by ``create``.

        Returns:
            ``(graph, True)`` or ``(None, False)``.
        """
        ...

    def delete(self, graph_id: str) -> bool:
        """Remove a graph.

        Args:
            graph_id: Identifier returned by ``create``.

        Returns:
            True if the entry existed and was removed.
        """
        ...

    def ids(self) -> List[str]:
        """Return live identifiers in creation order."""
        ...

    def size(self) -> int:
        """Return the number of live graphs."""
        ...

    def stats(self) -> Dict[str, Any]:
        """Return registry counters."""
        ...


class PathSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/solver/bfs_solver.py
    """

    def solve(
        self,
        graph: Graph,
        start: int,
        end: int,
        graph_id: str = "",
    ) -> PathResult:
        """Find a shortest path between two nodes.

        Args:
            graph: The graph to search.
            start: Start node.
            end: End node.
            graph_id: Identifier used for reporting.

        Returns:
            PathResult with the node sequence.
        """
        ...
