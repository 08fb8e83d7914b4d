"""In-memory undirected graph guarded by a reader/writer lock."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple, Union

from ..domain.models import Edge, as_edges
from .bfs import shortest_path
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class Graph:
    """Undirected adjacency structure over integer nodes.

    ``add_edge`` takes the write lock; every query takes the read lock,
    so concurrent ``shortest_path`` calls do not block each other.
    Duplicate edges are kept and show up as duplicate adjacency entries.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[int, List[int]] = {}
        self._edge_count = 0
        self._lock = ReadWriteLock()

    @classmethod
    def from_edges(cls, edges: Iterable[Union[Edge, Tuple[int, int]]]) -> Graph:
        """Build a graph by adding ``edges`` in order."""
        graph = cls()
        for edge in as_edges(edges):
            graph.add_edge(edge.u, edge.v)
        return graph

    def add_edge(self, u: int, v: int) -> None:
        with self._lock.write_locked():
            self._adjacency.setdefault(u, []).append(v)
            self._adjacency.setdefault(v, []).append(u)
            self._edge_count += 1

    def shortest_path(self, start: int, end: int) -> Tuple[List[int], bool]:
        """Return ``(path, found)`` for a fewest-edges path from start to end."""
        with self._lock.read_locked():
            path, found = shortest_path(self._adjacency, start, end)
        logger.debug(
            "BFS finished",
            extra={"start": start, "end": end, "found": found, "length": len(path)},
        )
        return path, found

    def neighbors(self, node: int) -> List[int]:
        """Return a copy of ``node``'s neighbour list (empty if unknown)."""
        with self._lock.read_locked():
            return list(self._adjacency.get(node, ()))

    def has_node(self, node: int) -> bool:
        with self._lock.read_locked():
            return node in self._adjacency

    def nodes(self) -> List[int]:
        """Return nodes in first-seen order."""
        with self._lock.read_locked():
            return list(self._adjacency)

    def adjacency(self) -> Dict[int, List[int]]:
        """Return a deep snapshot of the adjacency mapping."""
        with self._lock.read_locked():
            return {node: list(nbrs) for node, nbrs in self._adjacency.items()}

    @property
    def node_count(self) -> int:
        with self._lock.read_locked():
            return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        with self._lock.read_locked():
            return self._edge_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
