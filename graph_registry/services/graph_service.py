"""Graph service - Application orchestration.

This service sits between the HTTP layer and the registry/solver
adapters. It converts ``found == False`` outcomes into typed domain
errors so the transport can map each one to a response.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..domain.errors import GraphNotFoundError, GraphTooLargeError
from ..domain.models import GraphSummary, PathResult, as_edges
from ..graph import Graph
from ..ports.graph import EdgeLike, GraphRegistryPort, PathSolverPort


@dataclass
class GraphService:
    """Create, query and delete registered graphs.

    Attributes:
        registry: Stores graphs by identifier
        solver: Computes shortest paths
        max_edges_per_graph: Optional limit on submitted edge lists
    """

    registry: GraphRegistryPort
    solver: PathSolverPort
    max_edges_per_graph: Optional[int] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def create_graph(self, edges: Iterable[EdgeLike]) -> str:
        """Register a new graph built from ``edges``.

        Args:
            edges: Edges as ``Edge`` objects or ``(u, v)`` pairs.

        Returns:
            The new graph identifier.

        Raises:
            GraphTooLargeError: If the edge list exceeds the configured limit.
            RegistryFullError: If the registry is at capacity.
        """
        edge_list = as_edges(edges)
        if self.max_edges_per_graph is not None and len(edge_list) > self.max_edges_per_graph:
            raise GraphTooLargeError(
                f"Graph has {len(edge_list)} edges, limit is {self.max_edges_per_graph}",
                edge_count=len(edge_list),
                max_edges=self.max_edges_per_graph,
            )

        graph_id = self.registry.create(edge_list)
        self._logger.info(
            "Graph created",
            extra={"graph_id": graph_id, "edges": len(edge_list)},
        )
        return graph_id

    def get_graph(self, graph_id: str) -> Graph:
        """Return the registered graph.

        Raises:
            GraphNotFoundError: If no graph has this identifier.
        """
        graph, found = self.registry.lookup(graph_id)
        if not found or graph is None:
            self._logger.warning("Graph not found", extra={"graph_id": graph_id})
            raise GraphNotFoundError(f"Graph not found: {graph_id}", graph_id=graph_id)
        return graph

    def shortest_path(self, graph_id: str, start: int, end: int) -> PathResult:
        """Find a shortest path in a registered graph.

        Args:
            graph_id: Identifier returned by ``create_graph``.
            start: Start node.
            end: End node.

        Returns:
            PathResult with the node sequence.

        Raises:
            GraphNotFoundError: If no graph has this identifier.
            NoPathFoundError: If end is unreachable from start.
        """
        graph = self.get_graph(graph_id)
        return self.solver.solve(graph, start, end, graph_id=graph_id)

    def delete_graph(self, graph_id: str) -> None:
        """Delete a registered graph.

        Raises:
            GraphNotFoundError: If no graph has this identifier.
        """
        if not self.registry.delete(graph_id):
            self._logger.warning("Graph not found", extra={"graph_id": graph_id})
            raise GraphNotFoundError(f"Graph not found: {graph_id}", graph_id=graph_id)

    def describe_graph(self, graph_id: str) -> GraphSummary:
        graph = self.get_graph(graph_id)
        return GraphSummary(
            graph_id=graph_id,
            node_count=graph.node_count,
            edge_count=graph.edge_count,
        )

    def list_graphs(self) -> List[str]:
        return self.registry.ids()

    def graph_count(self) -> int:
        return self.registry.size()
