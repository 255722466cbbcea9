import pytest


def test_api_create_path_click_smoke():
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")

    from fastapi.testclient import TestClient

    from app import app

    client = TestClient(app)

    r = client.post("/maps", json={"map_text": "0 0 0 0\n0 0 1 0\n0 0 0 0\n", "hex_size": 1.0, "seed": 3})
    assert r.status_code == 200
    map_id = r.json()["map_id"]
    assert map_id in client.get("/maps").json()["maps"]

    r = client.get(f"/maps/{map_id}/state")
    assert r.status_code == 200
    state = r.json()
    assert state["tile_count"] == 12
    assert state["boat"] == [0, 0]
    assert "Legend:" in state["map_text"]

    r = client.post(f"/maps/{map_id}/path", json={"start": [0, 0], "goal": [2, 0]})
    data = r.json()
    assert data["found"] is True
    assert data["path"] == [[0, 0], [1, 0], [2, 0]]
    assert len(data["waypoints"]) == 3

    r = client.post(f"/maps/{map_id}/obstacles", json={"q": 1, "r": 0, "obstacle": True})
    assert r.json() == {"ok": True}
    r = client.post(f"/maps/{map_id}/path", json={"start": [0, 0], "goal": [2, 0]})
    assert len(r.json()["path"]) == 4

    r = client.post(f"/maps/{map_id}/click", json={"x": 3, "y": 2})
    out = r.json()
    assert out["path"][-1] == out["boat"]

    r = client.get(f"/maps/{map_id}/hex", params={"x": 0.0, "z": 0.0})
    assert r.json()["q"] == 0 and r.json()["r"] == 0 and r.json()["valid"] is True


def test_api_errors():
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")

    from fastapi.testclient import TestClient

    from app import app

    client = TestClient(app)

    assert client.get("/maps/nope/state").status_code == 404
    assert client.post("/maps", json={"map_text": "0 9\n"}).status_code == 400

    map_id = client.post("/maps", json={"map_text": "0 0\n", "hex_size": 1.0}).json()["map_id"]
    r = client.post(f"/maps/{map_id}/path", json={"start": "bad", "goal": [1, 0]})
    assert r.status_code == 400
    r = client.post(f"/maps/{map_id}/path", json={"start": [0, 0], "goal": [7, 7]})
    assert r.json() == {"found": False, "path": [], "waypoints": []}
    assert client.post(f"/maps/{map_id}/click", json={"x": "?"}).status_code == 400


def test_api_rejects_non_bool_obstacle_and_tolerates_nan():
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")

    from fastapi.testclient import TestClient

    from app import app

    client = TestClient(app)
    map_id = client.post("/maps", json={"map_text": "0 0\n0 0\n", "hex_size": 1.0}).json()["map_id"]

    r = client.post(f"/maps/{map_id}/obstacles", json={"q": 1, "r": 0, "obstacle": "false"})
    assert r.status_code == 400
    r = client.post(f"/maps/{map_id}/obstacles", json={"q": 1, "r": 0, "obstacle": 1})
    assert r.status_code == 400
    r = client.post(f"/maps/{map_id}/obstacles", json={"q": 1, "r": 0, "obstacle": False})
    assert r.json() == {"ok": True}

    r = client.get(f"/maps/{map_id}/hex", params={"x": "nan", "z": "inf"})
    assert r.status_code == 200
    assert r.json()["q"] == 0 and r.json()["r"] == 0
