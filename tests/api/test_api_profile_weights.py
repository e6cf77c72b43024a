"""API tests for profile and weight history endpoints."""


def test_default_profile(client):
    body = client.get("/profiles/default").json()
    assert body["weight_kg"] == 70.0
    assert body["height_cm"] == 175.0
    assert body["gender"] == "male"
    assert body["daily_steps_goal"] == 10000


def test_profile_lifecycle(client):
    created = client.post("/profiles", json={"weight_kg": 64.0, "height_cm": 168.0, "gender": "female", "daily_steps_goal": 9000})
    assert created.status_code == 201
    profile_id = created.json()["id"]

    assert client.post("/profiles", json={}).status_code == 409

    updated = client.put(f"/profiles/{profile_id}", json={"weight_kg": 63.0, "height_cm": 168.0, "gender": "female", "daily_steps_goal": 11000})
    assert updated.status_code == 200
    assert updated.json()["daily_steps_goal"] == 11000

    assert client.get(f"/profiles/{profile_id}").json()["weight_kg"] == 63.0
    assert client.delete(f"/profiles/{profile_id}").status_code == 204
    assert client.get(f"/profiles/{profile_id}").status_code == 404


def test_profile_rejects_non_positive_weight(client):
    assert client.post("/profiles", json={"weight_kg": 0}).status_code == 422


def test_weight_history_syncs_profile(client):
    profile_id = client.post("/profiles", json={"weight_kg": 80.0}).json()["id"]

    older = client.post(f"/weights?profile_id={profile_id}", json={"weight_kg": 79.0, "date": "2024-01-01T08:00:00Z"})
    newer = client.post(f"/weights?profile_id={profile_id}", json={"weight_kg": 77.5, "date": "2024-01-08T08:00:00Z"})
    assert older.status_code == 201
    assert newer.status_code == 201
    assert client.get(f"/profiles/{profile_id}").json()["weight_kg"] == 77.5

    listed = client.get("/weights").json()
    assert [m["weight_kg"] for m in listed] == [77.5, 79.0]

    assert client.delete(f"/weights/{newer.json()['id']}?profile_id={profile_id}").status_code == 204
    assert client.get(f"/profiles/{profile_id}").json()["weight_kg"] == 79.0


def test_edit_weight(client):
    created = client.post("/weights", json={"weight_kg": 70.0}).json()
    response = client.put(f"/weights/{created['id']}", json={"weight_kg": 69.4})
    assert response.status_code == 200
    assert response.json()["weight_kg"] == 69.4
    assert response.json()["date"] == created["date"]


def test_missing_weight(client):
    assert client.put("/weights/missing", json={"weight_kg": 70.0}).status_code == 404
    assert client.delete("/weights/missing").status_code == 404


def test_weight_with_unknown_profile_is_not_stored(client):
    response = client.post("/weights?profile_id=unknown", json={"weight_kg": 70.0})
    assert response.status_code == 404
    assert client.get("/weights").json() == []
