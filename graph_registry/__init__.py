"""Top-level package for the Graph Registry service.

The package keeps a registry of in-memory undirected graphs and answers
fewest-edges path queries over them. The HTTP layer in ``api`` is a thin
translation onto ``services.GraphService``.
"""

from .domain import Edge, GraphNotFoundError, NoPathFoundError, PathResult
from .graph import Graph

__all__ = ["Edge", "Graph", "GraphNotFoundError", "NoPathFoundError", "PathResult"]
