"""Graph structure and path-finding.

This subpackage contains the undirected Graph type, the reader/writer
lock that guards it, and the breadth-first shortest-path search.
"""

from .bfs import shortest_path
from .graph import Graph
from .rwlock import ReadWriteLock

__all__ = ["Graph", "ReadWriteLock", "shortest_path"]
