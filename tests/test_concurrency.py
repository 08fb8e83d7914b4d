"""Concurrent access to the registry and to a single graph."""

import threading
from concurrent.futures import ThreadPoolExecutor

from graph_registry.adapters.registry import InMemoryGraphRegistry
from graph_registry.graph import Graph


def test_concurrent_creates_get_unique_ids():
    registry = InMemoryGraphRegistry()

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda i: registry.create([(i, i + 1)]), range(200)))

    assert sorted(int(i) for i in ids) == list(range(1, 201))
    assert registry.size() == 200


def test_queries_isolated_from_unrelated_churn():
    registry = InMemoryGraphRegistry()
    edges = [(i, i + 1) for i in range(50)] + [(0, 25)]
    graph_id = registry.create(edges)
    graph, _ = registry.lookup(graph_id)
    expected = graph.shortest_path(0, 50)
    stop = threading.Event()

    def churn():
        while not stop.is_set():
            other = registry.create([(1, 2), (2, 3)])
            registry.delete(other)

    def query(_):
        captured, found = registry.lookup(graph_id)
        assert found
        return captured.shortest_path(0, 50)

    churners = [threading.Thread(target=churn) for _ in range(2)]
    for t in churners:
        t.start()
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(query, range(300)))
    finally:
        stop.set()
        for t in churners:
            t.join(timeout=5)

    assert all(result == expected for result in results)
    assert expected == ([0, 25, 26] + list(range(27, 51)), True)


def test_writes_and_reads_interleave_safely():
    graph = Graph()
    graph.add_edge(0, 1)

    def writer(start):
        for i in range(start, start + 100):
            graph.add_edge(i, i + 1000)

    def reader(_):
        path, found = graph.shortest_path(0, 1)
        return found and path == [0, 1]

    threads = [threading.Thread(target=writer, args=(n * 100 + 2,)) for n in range(4)]
    for t in threads:
        t.start()
    with ThreadPoolExecutor(max_workers=4) as pool:
        ok = list(pool.map(reader, range(200)))
    for t in threads:
        t.join(timeout=5)

    assert all(ok)
    assert graph.edge_count == 401
