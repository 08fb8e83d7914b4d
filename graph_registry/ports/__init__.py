"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters. They enable dependency injection and make the system testable.
"""

from .graph import EdgeLike, GraphRegistryPort, PathSolverPort

__all__ = [
    "EdgeLike",
    "GraphRegistryPort",
    "PathSolverPort",
]
