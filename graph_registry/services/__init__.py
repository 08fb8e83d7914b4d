"""Services layer - Application orchestration.

Available services:
- GraphService: Create, query and delete registered graphs
"""

from .graph_service import GraphService

__all__ = ["GraphService"]
