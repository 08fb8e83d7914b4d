"""Thread-safe in-memory graph registry.

Graphs are kept in a plain dict guarded by a single lock. Critical
sections only touch the dict and the counter, so graph construction
happens before the lock is taken and traversal happens after the
reference has been handed out.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ...domain.errors import RegistryFullError
from ...graph import Graph
from ...ports.graph import EdgeLike


@dataclass
class InMemoryGraphRegistry:
    """Registry of live graphs keyed by string identifiers.

    This registry implements GraphRegistryPort. One instance is owned
    by the container and shared by every request handler.

    Attributes:
        max_graphs: Maximum number of live graphs (None = unlimited)
        name: Registry name for logging

    Example:
        registry = InMemoryGraphRegistry()
        graph_id = registry.create([(1, 2), (2, 3)])
        graph, found = registry.lookup(graph_id)
    """

    max_graphs: Optional[int] = None
    name: str = "graphs"

    _graphs: Dict[str, Graph] = field(default_factory=dict, repr=False)
    _counter: int = field(default=0, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _deleted: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"registry.{self.name}")

    def create(self, edges: Iterable[EdgeLike]) -> str:
        """Build a graph from ``edges`` and register it.

        Args:
            edges: Edges to add, in order.

        Returns:
            The newly assigned identifier, starting at "1".

        Raises:
            RegistryFullError: If ``max_graphs`` live graphs already exist.
        """
        graph = Graph.from_edges(edges)

        with self._lock:
            if self.max_graphs is not None and len(self._graphs) >= self.max_graphs:
                raise RegistryFullError(
                    f"Registry holds the maximum of {self.max_graphs} graphs",
                    max_graphs=self.max_graphs,
                )
            self._counter += 1
            graph_id = str(self._counter)
            self._graphs[graph_id] = graph

        self._logger.info(
            "Graph registered",
            extra={"graph_id": graph_id, "edges": graph.edge_count},
        )
        return graph_id

    def lookup(self, graph_id: str) -> Tuple[Optional[Graph], bool]:
        """Return the registered graph without copying it.

        Args:
            graph_id: The identifier to look up.

        Returns:
            ``(graph, True)`` if present, ``(None, False)`` otherwise.
        """
        with self._lock:
            graph = self._graphs.get(graph_id)
        return graph, graph is not None

    def delete(self, graph_id: str) -> bool:
        """Remove a graph from the registry.

        Queries that already hold the graph keep working against it.

        Args:
            graph_id: The identifier to remove.

        Returns:
            True if the entry existed and was removed.
        """
        with self._lock:
            removed = self._graphs.pop(graph_id, None) is not None
            if removed:
                self._deleted += 1

        if removed:
            self._logger.info("Graph deleted", extra={"graph_id": graph_id})
        else:
            self._logger.debug("Delete of unknown graph", extra={"graph_id": graph_id})
        return removed

    def clear(self) -> int:
        """Drop every entry. The id counter is not reset.

        Returns:
            Number of entries that were removed.
        """
        with self._lock:
            count = len(self._graphs)
            self._graphs.clear()
            self._deleted += count
        self._logger.info("Registry cleared", extra={"entries_cleared": count})
        return count

    def ids(self) -> List[str]:
        """Return live identifiers in creation order."""
        with self._lock:
            return list(self._graphs)

    def size(self) -> int:
        with self._lock:
            return len(self._graphs)

    def stats(self) -> Dict[str, Any]:
        """Return registry statistics.

        Returns:
            Dictionary with live, created and deleted counts and the
            most recently assigned id.
        """
        with self._lock:
            return {
                "live": len(self._graphs),
                "created": self._counter,
                "deleted": self._deleted,
                "last_id": str(self._counter) if self._counter else None,
            }
