"""Shortest-path computation using breadth-first search.

Edges are unweighted, so the first time BFS dequeues the target the
predecessor chain describes a path with the minimum number of edges.
Neighbours are expanded in adjacency-list order and nodes are marked
visited when discovered, which means ties are broken by the order in
which edges were added.
"""

from collections import deque
from typing import Deque, Dict, List, Mapping, Sequence, Set, Tuple

Adjacency = Mapping[int, Sequence[int]]


def shortest_path(adjacency: Adjacency, start: int, end: int) -> Tuple[List[int], bool]:
    """Compute a shortest path between two nodes.

    Parameters
    ----------
    adjacency:
        Mapping of node to its ordered neighbour list.
    start:
        Node to start from.
    end:
        Node to reach.

    Returns
    -------
    list[int], bool
        The nodes from ``start`` to ``end`` (inclusive) and ``True``,
        or ``([], False)`` when ``end`` is unreachable. ``start == end``
        always yields ``([start], True)``, even for unknown nodes.
    """
    if start == end:
        return [start], True

    visited: Set[int] = {start}
    predecessors: Dict[int, int] = {}
    frontier: Deque[int] = deque([start])

    while frontier:
        node = frontier.popleft()

        if node == end:
            return _reconstruct(predecessors, start, end), True

        for neighbor in adjacency.get(node, ()):
            if neighbor not in visited:
                visited.add(neighbor)
                predecessors[neighbor] = node
                frontier.append(neighbor)

    return [], False


def _reconstruct(predecessors: Mapping[int, int], start: int, end: int) -> List[int]:
    path: List[int] = [end]
    current = end
    while current != start:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path
