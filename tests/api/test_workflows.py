# tests/api/test_workflows.py
import re
from datetime import datetime

UUID_RE = r"^[0-9a-fA-F-]{36}$"


def _create(client, **overrides):
    resp = client.post("/api/workflows", json={"name": "wf", **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_workflow_returns_201_camel_case(client, workflow_payload):
    resp = client.post("/api/workflows", json=workflow_payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert re.match(UUID_RE, body["id"])
    assert body["isActive"] is True
    assert body["createdAt"] == body["updatedAt"]
    assert body["nodes"][0]["data"]["category"] == "trigger"
    assert body["edges"] == workflow_payload["edges"]


def test_create_invalid_returns_400(client):
    resp = client.post("/api/workflows", json={"description": "missing name"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Invalid workflow data"
    assert body["errors"]


def test_list_returns_all_in_insertion_order(client):
    ids = [_create(client, name=f"w{i}")["id"] for i in range(3)]
    resp = client.get("/api/workflows")
    assert resp.status_code == 200
    assert [wf["id"] for wf in resp.json()] == ids


def test_list_filters_by_active(client):
    on = _create(client, name="on", isActive=True)["id"]
    off = _create(client, name="off")["id"]
    assert [wf["id"] for wf in client.get("/api/workflows?active=true").json()] == [on]
    assert [wf["id"] for wf in client.get("/api/workflows?active=false").json()] == [off]


def test_list_bad_filter_returns_400(client):
    resp = client.get("/api/workflows?active=perhaps")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request parameters"


def test_get_workflow(client, workflow_payload):
    created = client.post("/api/workflows", json=workflow_payload).json()
    resp = client.get(f"/api/workflows/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_missing_returns_404(client):
    resp = client.get("/api/workflows/00000000-0000-0000-0000-000000000000")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Workflow not found"}


def test_put_saves_canvas_graph(client, workflow_payload):
    created = _create(client, name="canvas")
    resp = client.put(
        f"/api/workflows/{created['id']}",
        json={"nodes": workflow_payload["nodes"], "edges": workflow_payload["edges"]},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["name"] == "canvas"
    assert len(body["nodes"]) == 2
    assert body["createdAt"] == created["createdAt"]
    assert datetime.fromisoformat(body["updatedAt"]) >= datetime.fromisoformat(created["updatedAt"])


def test_put_null_name_returns_400(client):
    created = _create(client)
    resp = client.put(f"/api/workflows/{created['id']}", json={"name": None})
    assert resp.status_code == 400


def test_put_missing_returns_404(client):
    resp = client.put("/api/workflows/missing", json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Workflow not found"


def test_delete_then_get_returns_404(client):
    created = _create(client)
    resp = client.delete(f"/api/workflows/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/api/workflows/{created['id']}").status_code == 404


def test_delete_missing_returns_404(client):
    assert client.delete("/api/workflows/missing").status_code == 404


def test_validate_unsaved_graph(client, workflow_payload):
    resp = client.post("/api/workflows/validate", json={"nodes": workflow_payload["nodes"], "edges": workflow_payload["edges"]})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["valid"] is True
    assert body["nodeCount"] == 2 and body["edgeCount"] == 1 and body["triggerCount"] == 1
    assert client.get("/api/workflows").json() == []


def test_validate_stored_workflow_reports_dangling_edge(client, workflow_payload):
    edges = workflow_payload["edges"] + [{"id": "loose", "source": "webhook-1", "target": "missing"}]
    created = _create(client, nodes=workflow_payload["nodes"], edges=edges)
    resp = client.post(f"/api/workflows/{created['id']}/validate")
    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is False
    assert body["danglingEdges"] == ["loose"]


def test_validate_empty_graph_returns_400(client):
    created = _create(client)
    resp = client.post(f"/api/workflows/{created['id']}/validate")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Flow must contain at least one node"}
    assert client.post("/api/workflows/validate", json={}).status_code == 400


def test_validate_missing_workflow_returns_404(client):
    assert client.post("/api/workflows/missing/validate").status_code == 404
