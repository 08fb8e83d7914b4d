from fastapi.testclient import TestClient

from graph_registry.api import create_app
from graph_registry.config import AppConfig, RegistryConfig
from graph_registry.container import Container

CHAIN = [{"u": 1, "v": 2}, {"u": 2, "v": 3}, {"u": 3, "v": 4}]


def test_create_returns_increasing_ids(client):
    first = client.post("/graph", json=CHAIN)
    second = client.post("/graph", json=[{"u": 5, "v": 6}])

    assert first.status_code == 200
    assert first.json() == {"id": "1"}
    assert second.json() == {"id": "2"}


def test_shortest_path_query_params(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.get(f"/graph/{graph_id}/shortest_path", params={"start": 1, "end": 4})

    assert resp.status_code == 200
    assert resp.json() == {"path": [1, 2, 3, 4]}


def test_shortest_path_json_body(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.post(f"/graph/{graph_id}/shortest_path", json={"start": 4, "end": 2})

    assert resp.status_code == 200
    assert resp.json() == {"path": [4, 3, 2]}


def test_path_not_found(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.get(f"/graph/{graph_id}/shortest_path", params={"start": 1, "end": 5})

    assert resp.status_code == 404
    assert resp.json() == {"detail": "Path not found"}


def test_graph_not_found(client):
    resp = client.get("/graph/123/shortest_path", params={"start": 1, "end": 2})

    assert resp.status_code == 404
    assert resp.json() == {"detail": "Graph not found"}


def test_delete_then_delete_again(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    first = client.delete(f"/graph/{graph_id}")
    second = client.delete(f"/graph/{graph_id}")

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404
    assert second.json() == {"detail": "Graph not found"}


def test_malformed_create_body_is_400(client):
    assert client.post("/graph", json=[{"u": "a", "v": 2}]).status_code == 400
    assert client.post("/graph", json=[{"u": 1}]).status_code == 400
    assert client.post("/graph", json={"u": 1, "v": 2}).status_code == 400
    assert client.post("/graph", content=b"not json",
                       headers={"content-type": "application/json"}).status_code == 400


def test_malformed_query_is_400(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.get(f"/graph/{graph_id}/shortest_path", params={"start": "x", "end": 2})
    missing = client.get(f"/graph/{graph_id}/shortest_path", params={"start": 1})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid request"
    assert missing.status_code == 400


def test_empty_edge_list(client):
    graph_id = client.post("/graph", json=[]).json()["id"]

    resp = client.get(f"/graph/{graph_id}/shortest_path", params={"start": 9, "end": 9})

    assert resp.json() == {"path": [9]}


def test_list_describe_and_health(client):
    client.post("/graph", json=CHAIN)
    client.post("/graph", json=[])
    client.delete("/graph/2")

    assert client.get("/graph").json() == {"ids": ["1"]}
    assert client.get("/graph/1").json() == {"id": "1", "nodes": 4, "edges": 3}
    assert client.get("/graph/2").status_code == 404
    assert client.get("/health").json() == {"ok": True, "graphs": 1}


def test_apps_do_not_share_registries():
    first = TestClient(create_app(Container.create_default(AppConfig())))
    second = TestClient(create_app(Container.create_default(AppConfig())))

    first.post("/graph", json=CHAIN)

    assert second.post("/graph", json=CHAIN).json() == {"id": "1"}


def test_registry_limits_map_to_http_errors():
    config = AppConfig(registry=RegistryConfig(max_graphs=1, max_edges_per_graph=2))
    client = TestClient(create_app(Container.create_default(config)))

    assert client.post("/graph", json=CHAIN).status_code == 413
    assert client.post("/graph", json=CHAIN[:2]).status_code == 200
    assert client.post("/graph", json=[]).status_code == 503


def test_shortest_path_get_with_json_body(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.request("GET", f"/graph/{graph_id}/shortest_path", json={"start": 1, "end": 4})

    assert resp.status_code == 200
    assert resp.json() == {"path": [1, 2, 3, 4]}


def test_query_string_wins_over_body(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.request(
        "GET",
        f"/graph/{graph_id}/shortest_path",
        params={"start": 2},
        json={"start": 1, "end": 4},
    )

    assert resp.json() == {"path": [2, 3, 4]}


def test_get_with_malformed_body_is_400(client):
    graph_id = client.post("/graph", json=CHAIN).json()["id"]

    resp = client.request("GET", f"/graph/{graph_id}/shortest_path", json={"start": "a", "end": 4})

    assert resp.status_code == 400


def test_null_body_creates_empty_graph(client):
    resp = client.post("/graph", content=b"null", headers={"content-type": "application/json"})

    assert resp.status_code == 200
    graph_id = resp.json()["id"]
    assert client.get(f"/graph/{graph_id}").json() == {"id": graph_id, "nodes": 0, "edges": 0}
