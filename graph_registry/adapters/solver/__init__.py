"""Solver adapters - Implementations of PathSolverPort.

Available implementations:
- BFSPathSolver: Fewest-edges paths via breadth-first search
"""

from .bfs_solver import BFSPathSolver

__all__ = ["BFSPathSolver"]
