"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (in-memory registry)
- Path solving (breadth-first search)
"""
