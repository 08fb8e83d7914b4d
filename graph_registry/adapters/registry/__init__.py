"""Registry adapters - Implementations of GraphRegistryPort.

Available implementations:
- InMemoryGraphRegistry: Thread-safe process-memory registry
"""

from .memory_registry import InMemoryGraphRegistry

__all__ = ["InMemoryGraphRegistry"]
