from __future__ import annotations

from fastapi.testclient import TestClient

from app.settings import settings

PREDICTION = {
    "planetType": "Super Earth",
    "probability": 0.9,
    "radius": 1.5,
    "distanceFromStar": 1.2,
    "hasWater": True,
    "hasAtmosphere": False,
    "isHabitable": False,
    "temperature": 280,
    "confidence": 0.8,
}

RICH_FEATURES = {
    "timePoints": 6000,
    "fluxPoints": 6000,
    "timeRange": 27.0,
    "fluxMean": 1.0,
    "fluxMin": 0.95,
    "fluxMax": 1.05,
    "fluxStdDev": 0.02,
}


def test_root(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "operational"


def test_synthesis_three_planets(client: TestClient) -> None:
    response = client.post(
        "/api/v1/synthesis/",
        json={"prediction": PREDICTION, "features": RICH_FEATURES, "seed": 21},
    )
    assert response.status_code == 200
    body = response.json()

    assert body["totalPlanets"] == 3
    assert body["seed"] == 21
    assert [p["id"] for p in body["planets"]] == [1, 2, 3]
    primary, _, transit = body["planets"]
    assert primary["name"] == "Extracted Planet (Super Earth)"
    assert primary["color"] == "#FF6B6B"
    assert primary["datasetInfo"]["timePoints"] == 6000
    assert transit["type"] == "Gas Giant"
    assert transit["hasWater"] is False
    assert transit["isHabitable"] is False


def test_synthesis_same_seed_same_bytes(client: TestClient) -> None:
    payload = {"prediction": PREDICTION, "features": RICH_FEATURES, "seed": 8}
    first = client.post("/api/v1/synthesis/", json=payload)
    second = client.post("/api/v1/synthesis/", json=payload)
    assert first.content == second.content


def test_synthesis_tolerates_missing_fields(client: TestClient) -> None:
    response = client.post(
        "/api/v1/synthesis/",
        json={"prediction": {"planetType": "Rocky", "temperature": None}, "features": {"timePoints": "n/a"}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["totalPlanets"] == 1
    assert body["planets"][0]["temperature"] == 0.0
    assert body["features"]["timePoints"] == 0


def test_synthesis_requires_prediction(client: TestClient) -> None:
    response = client.post("/api/v1/synthesis/", json={"features": RICH_FEATURES})
    assert response.status_code == 422


def test_history_endpoint(client: TestClient) -> None:
    client.post("/api/v1/synthesis/", json={"prediction": PREDICTION, "seed": 1})
    body = client.get("/api/v1/synthesis/history").json()

    assert body["maxSize"] == settings.history_size
    assert body["analyses"][0]["planetType"] == "Super Earth"


def test_features_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/v1/synthesis/features",
        json={"time": [0, 1, 2], "flux": [1.0, 1.0, 1.0]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["timePoints"] == 3
    assert body["timeRange"] == 2.0
    assert body["fluxStdDev"] == 0.0


def test_scene_lifecycle(client: TestClient) -> None:
    created = client.post("/api/v1/scene/", json={"seed": 4})
    assert created.status_code == 201
    scene = created.json()
    scene_id = scene["sceneId"]
    assert len(scene["planets"]) == 4
    assert scene["cursorHint"] == "default"

    ticked = client.post(f"/api/v1/scene/{scene_id}/tick", json={"frames": 5})
    assert ticked.status_code == 200
    assert ticked.json()["tickCount"] == 5

    fetched = client.get(f"/api/v1/scene/{scene_id}")
    assert fetched.json()["positions"] == ticked.json()["positions"]

    assert client.delete(f"/api/v1/scene/{scene_id}").status_code == 204
    assert client.get(f"/api/v1/scene/{scene_id}").status_code == 404


def test_scene_from_synthesized_planets(client: TestClient) -> None:
    planets = client.post(
        "/api/v1/synthesis/",
        json={"prediction": PREDICTION, "features": RICH_FEATURES, "seed": 2},
    ).json()["planets"]

    scene = client.post("/api/v1/scene/", json={"planets": planets, "seed": 2}).json()

    assert [p["id"] for p in scene["planets"]] == [1, 2, 3]
    assert [o["radius"] for o in scene["orbits"]] == [5.0, 9.0, 13.0]
    assert set(scene["positions"]) == {"1", "2", "3"}


def test_pointer_endpoints(client: TestClient) -> None:
    scene_id = client.post("/api/v1/scene/", json={"seed": 0}).json()["sceneId"]
    base = f"/api/v1/scene/{scene_id}/pointer"

    client.post(f"{base}/enter", json={"bodyId": 1})
    client.post(f"{base}/enter", json={"bodyId": 2})
    view = client.post(f"{base}/leave", json={"bodyId": 1}).json()
    assert view["activeId"] == 2
    assert view["cursorHint"] == "pointer"

    view = client.post(f"{base}/select", json={"bodyId": 3}).json()
    assert view["selectedId"] == 3

    view = client.post(f"{base}/capture-lost", json={"bodyId": 2}).json()
    assert view["activeId"] is None
    assert view["cursorHint"] == "default"

    client.post(f"{base}/enter", json={"bodyId": 4})
    view = client.post(f"{base}/leave-all").json()
    assert view["activeId"] is None


def test_pointer_unknown_body_is_404(client: TestClient) -> None:
    scene_id = client.post("/api/v1/scene/", json={"seed": 0}).json()["sceneId"]
    response = client.post(f"/api/v1/scene/{scene_id}/pointer/enter", json={"bodyId": 99})
    assert response.status_code == 404


def test_add_and_remove_body(client: TestClient) -> None:
    scene_id = client.post("/api/v1/scene/", json={"seed": 0}).json()["sceneId"]
    planet = {
        "id": 10,
        "name": "Extra",
        "type": "Rocky",
        "radius": 1.0,
        "distanceFromStar": 0.5,
        "temperature": 300,
    }

    added = client.post(f"/api/v1/scene/{scene_id}/bodies", json=planet)
    assert added.status_code == 201
    assert "10" in added.json()["positions"]

    assert client.post(f"/api/v1/scene/{scene_id}/bodies", json=planet).status_code == 400

    removed = client.delete(f"/api/v1/scene/{scene_id}/bodies/10")
    assert removed.status_code == 200
    assert "10" not in removed.json()["positions"]
    assert client.delete(f"/api/v1/scene/{scene_id}/bodies/10").status_code == 404


def test_tick_rejects_negative_dt(client: TestClient) -> None:
    scene_id = client.post("/api/v1/scene/", json={"seed": 0}).json()["sceneId"]
    response = client.post(f"/api/v1/scene/{scene_id}/tick", json={"dt": -1})
    assert response.status_code == 422


def test_archive_fetch(client: TestClient, monkeypatch) -> None:
    monkeypatch.setattr(settings, "archive_fetch_delay", 0.0)
    response = client.post("/api/v1/archive/fetch", json={"apiKey": "key", "targetId": "KIC 1234567"})
    assert response.status_code == 200
    assert response.json()["status"] == "simulated"


def test_archive_fetch_failure_is_generic(client: TestClient) -> None:
    response = client.post("/api/v1/archive/fetch", json={"apiKey": "", "targetId": ""})
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch data"


def test_tick_rejects_infinite_dt_and_keeps_scene_intact(client: TestClient) -> None:
    scene_id = client.post("/api/v1/scene/", json={"seed": 0}).json()["sceneId"]
    before = client.get(f"/api/v1/scene/{scene_id}").json()

    response = client.post(
        f"/api/v1/scene/{scene_id}/tick",
        content='{"dt": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422

    after = client.get(f"/api/v1/scene/{scene_id}").json()
    assert after["positions"] == before["positions"]
    assert all(o["angle"] is not None for o in after["orbits"])


def test_add_body_rejects_negative_temperature(client: TestClient) -> None:
    scene_id = client.post("/api/v1/scene/", json={"seed": 0}).json()["sceneId"]
    planet = {"id": 10, "name": "Cold", "type": "Rocky", "radius": 1.0, "distanceFromStar": 0.5, "temperature": -5}
    assert client.post(f"/api/v1/scene/{scene_id}/bodies", json=planet).status_code == 422


def test_empty_planet_list_is_rejected(client: TestClient) -> None:
    response = client.post("/api/v1/scene/", json={"planets": []})
    assert response.status_code == 400
