"""
Tests for the Flask JSON API.
"""

EXAMPLE = "4\nA\nB\nC\nD\n2\nA B\nC D\nUD\n"


def test_algorithms_listing(client):
    resp = client.get("/api/algorithms")

    assert resp.status_code == 200
    keys = [a["key"] for a in resp.get_json()["algorithms"]]
    assert "bfs" in keys and "postorder" in keys


def test_default_state(client):
    state = client.get("/api/state").get_json()

    assert state["nodes"] == ["A", "B"]
    assert state["edges"] == []
    assert state["undirected"] is True


def test_create_and_run(client):
    resp = client.post("/api/graph", json={
        "nodes": ["A", "B", "C"],
        "edges": [["A", "B"], ["B", "C", 2]],
        "undirected": True,
    })
    assert resp.status_code == 200

    resp = client.post("/api/run", json={"algorithm": "dijkstra", "source": "A", "target": "C"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is True
    assert body["output"] == {"path": ["A", "B", "C"], "distance": 3}

    state = client.get("/api/state").get_json()
    assert state["selected_algo"] == "dijkstra"
    assert state["source"] == "A"


def test_create_rejects_unknown_labels(client):
    resp = client.post("/api/graph", json={"nodes": ["A"], "edges": [["A", "B"]]})

    assert resp.status_code == 400
    assert "unknown" in resp.get_json()["error"]


def test_import_then_export(client):
    resp = client.post("/api/graph/import", json={"text": EXAMPLE})
    assert resp.status_code == 200
    assert resp.get_json()["nodes"] == ["A", "B", "C", "D"]

    resp = client.post("/api/run", json={"algorithm": "components"})
    assert resp.get_json()["output"] == {"components": [["A", "B"], ["C", "D"]]}

    assert client.get("/api/graph/export").get_json() == {"text": EXAMPLE}


def test_import_error_reports_line(client):
    resp = client.post("/api/graph/import", json={"text": "2\nA\nB\n1\nA Z\nUD"})

    assert resp.status_code == 400
    assert resp.get_json()["line"] == 5


def test_run_errors_are_400(client):
    assert client.post("/api/run", json={"algorithm": "nope"}).status_code == 400
    assert client.post("/api/run", json={"algorithm": "bfs"}).status_code == 400
    assert client.post("/api/run", data="not json").status_code == 400


def test_create_rejects_string_directedness(client):
    resp = client.post("/api/graph", json={"nodes": ["A", "B"], "edges": [], "undirected": "false"})
    assert resp.status_code == 400


def test_empty_graph_export_is_400(client):
    assert client.post("/api/graph", json={"nodes": [], "edges": []}).status_code == 200
    assert client.get("/api/graph/export").status_code == 400
