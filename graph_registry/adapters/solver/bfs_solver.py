"""BFS path solver adapter.

This adapter wraps ``Graph.shortest_path`` and adds:
- Domain model output (PathResult)
- Typed error on unreachable targets
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoPathFoundError
from ...domain.models import PathResult
from ...graph import Graph


@dataclass
class BFSPathSolver:
    """Path solver using breadth-first search.

    This adapter implements PathSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        start: int,
        end: int,
        graph_id: str = "",
    ) -> PathResult:
        """Find a fewest-edges path between two nodes.

        Args:
            graph: The graph to search.
            start: Start node.
            end: End node.
            graph_id: Identifier used in errors and logs.

        Returns:
            PathResult with the node sequence from start to end.

        Raises:
            NoPathFoundError: If end is unreachable from start.
        """
        self._logger.debug(
            "Solving path",
            extra={"graph_id": graph_id, "start": start, "end": end},
        )

        path, found = graph.shortest_path(start, end)

        if not found:
            self._logger.warning(
                "No path found",
                extra={"graph_id": graph_id, "start": start, "end": end},
            )
            raise NoPathFoundError(
                f"No path from {start} to {end}",
                graph_id=graph_id,
                start=start,
                end=end,
            )

        self._logger.info(
            "Path found",
            extra={"graph_id": graph_id, "start": start, "end": end, "hops": len(path) - 1},
        )
        return PathResult(graph_id=graph_id, start=start, end=end, path=tuple(path))

    def solve_safe(
        self,
        graph: Graph,
        start: int,
        end: int,
        graph_id: str = "",
    ) -> PathResult:
        """Find a path, returning an empty result instead of raising.

        Args:
            graph: The graph to search.
            start: Start node.
            end: End node.
            graph_id: Identifier copied into the result.

        Returns:
            PathResult with the path, or an empty path if unreachable.
        """
        path, found = graph.shortest_path(start, end)
        if not found:
            return PathResult(graph_id=graph_id, start=start, end=end)
        return PathResult(graph_id=graph_id, start=start, end=end, path=tuple(path))
