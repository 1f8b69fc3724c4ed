"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app
from tests.conftest import CROWDED, TRIANGLE


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 10


def test_layout_triangle():
    response = client.post("/api/layout", json={"connections": TRIANGLE, "width": 1000, "height": 1000})
    assert response.status_code == 200
    data = response.json()
    assert [n["id"] for n in data["visible_nodes"]] == ["A", "B", "C"]
    assert [e["id"] for e in data["visible_edges"]] == ["e0", "e1", "e2"]
    assert data["overflow_buckets"] == [[], [], [], []]
    assert data["errors"] == {}

    node_a = data["visible_nodes"][0]
    assert node_a["color_index"] == 0
    assert node_a["color"]["background"] == "blue-100"
    assert abs(node_a["x"] - 500) < 1e-6
    assert abs(node_a["y"] - 270) < 1e-6

    edge = data["visible_edges"][0]
    assert edge["from_id"] == "A"
    assert edge["to_id"] == "B"
    assert len(edge["midpoint"]) == 2


def test_layout_overflow_regions():
    response = client.post("/api/layout", json={"connections": CROWDED, "width": 100, "height": 100})
    assert response.status_code == 200
    data = response.json()
    assert data["visible_edges"] == []
    assert [len(b) for b in data["overflow_buckets"]] == [3, 2, 2, 2]
    assert [e["id"] for e in data["overflow_regions"]["top-right"]] == ["e0", "e4", "e8"]


def test_layout_unmeasured_container():
    response = client.post("/api/layout", json={"connections": TRIANGLE, "width": 0, "height": 700})
    assert response.status_code == 200
    data = response.json()
    assert data["visible_nodes"] == []
    assert data["overflow_buckets"] == [[], [], [], []]


def test_layout_accepts_malformed_connections():
    payload = {
        "connections": [{"from": "A"}, {"to": "B", "label": "x"}, {"from": "A", "to": "B", "label": "ok"}],
        "width": 1000,
        "height": 1000,
    }
    response = client.post("/api/layout", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data["visible_edges"]] == ["e2"]


def test_layout_rejects_negative_size():
    response = client.post("/api/layout", json={"connections": TRIANGLE, "width": -1, "height": 100})
    assert response.status_code == 422
