from __future__ import annotations

import asyncio
from dataclasses import replace

from fastapi.testclient import TestClient

from agency_api.app import create_app
from agency_api.db.session import Database


def _new_user(client, email="a@x.com", **overrides):
    body = {"full_name": "A", "email": email, "role": "Player", "password": "p"}
    body.update(overrides)
    return client.post("/users", json=body)


def test_liveness(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "FootballAgentSL backend is running"


def test_create_and_fetch_user(client):
    created = _new_user(client, phone="+94 70 123 4567")
    assert created.status_code == 200
    user_id = created.json()["id"]

    fetched = client.get(f"/users/{user_id}")
    assert fetched.status_code == 200
    body = fetched.json()
    assert body["role"] == "Player"
    assert body["full_name"] == "A"
    assert body["phone"] == "+94 70 123 4567"
    assert set(body) == {"id", "full_name", "email", "phone", "created_at", "role"}


def test_create_validation_errors(client):
    missing = client.post("/users", json={"full_name": "A", "email": "a@x.com", "role": "Player"})
    assert missing.status_code == 400
    assert missing.json() == {"error": "Missing fields"}

    bad_role = _new_user(client, role="Scout")
    assert bad_role.status_code == 400
    assert bad_role.json() == {"error": "Invalid role"}


def test_create_without_usable_body_is_missing_fields(client):
    for response in (
        client.post("/users"),
        client.post("/users", json=[]),
        client.post("/users", content=b"not json", headers={"Content-Type": "application/json"}),
        _new_user(client, phone=5551234),
    ):
        assert response.status_code == 400
        assert response.json() == {"error": "Missing fields"}
    assert client.get("/users").json() == []


def test_update_without_usable_body_is_no_updatable_fields(client):
    user_id = _new_user(client).json()["id"]

    for response in (
        client.put(f"/users/{user_id}"),
        client.put(f"/users/{user_id}", json=["phone"]),
        client.put(f"/users/{user_id}", json={"phone": 5551234}),
    ):
        assert response.status_code == 400
        assert response.json() == {"error": "No updatable fields"}
    assert client.get(f"/users/{user_id}").json()["phone"] is None


def test_non_numeric_user_id_keeps_validation_status(client):
    response = client.get("/users/abc")
    assert response.status_code == 422


def test_duplicate_email_is_conflict(client):
    assert _new_user(client).status_code == 200
    second = _new_user(client, full_name="B", role="Agent")
    assert second.status_code == 409
    assert "error" in second.json()
    assert len(client.get("/users").json()) == 1


def test_get_missing_user_is_404(client):
    response = client.get("/users/999")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_partial_update(client):
    user_id = _new_user(client).json()["id"]

    response = client.put(f"/users/{user_id}", json={"phone": "555", "role": "Agent"})
    assert response.json() == {"changes": 1}
    body = client.get(f"/users/{user_id}").json()
    assert body["phone"] == "555"
    assert body["role"] == "Agent"
    assert body["email"] == "a@x.com"

    empty = client.put(f"/users/{user_id}", json={})
    assert empty.status_code == 400
    assert empty.json() == {"error": "No updatable fields"}

    invalid = client.put(f"/users/{user_id}", json={"role": "Coach"})
    assert invalid.status_code == 400
    assert invalid.json() == {"error": "Invalid role"}

    unknown = client.put("/users/4242", json={"full_name": "Nobody"})
    assert unknown.status_code == 200
    assert unknown.json() == {"changes": 0}


def test_delete_and_list(client):
    ids = [_new_user(client, email=f"u{i}@x.com").json()["id"] for i in range(3)]

    assert client.delete(f"/users/{ids[1]}").json() == {"deleted": 1}
    assert client.delete(f"/users/{ids[1]}").json() == {"deleted": 0}

    listed = client.get("/users").json()
    assert [row["id"] for row in listed] == [ids[0], ids[2]]
    assert all("password_hash" not in row for row in listed)


def test_roles_endpoint(client):
    names = [role["name"] for role in client.get("/roles").json()]
    assert names == ["Admin", "Agent", "Player", "ClubManager"]


def test_profiles_and_clubs_flow(client):
    user_id = _new_user(client).json()["id"]

    player = client.post("/players", json={"user_id": user_id, "position": "Defender", "dob": "2000-02-29"})
    assert player.status_code == 200
    player_id = player.json()["id"]
    assert client.post("/players", json={"user_id": user_id}).status_code == 409
    assert client.post("/players", json={}).status_code == 400
    assert client.post("/agents", json={"user_id": 999}).status_code == 404

    club = client.post("/clubs", json={"name": "Negombo Youth", "manager_user_id": user_id})
    club_id = club.json()["id"]

    fetched = client.get(f"/players/{player_id}").json()
    assert fetched["position"] == "Defender"
    assert fetched["dob"] == "2000-02-29"

    client.delete(f"/users/{user_id}")
    assert client.get(f"/players/{player_id}").status_code == 404
    assert client.get(f"/clubs/{club_id}").json()["manager_user_id"] is None


def test_request_timeout_returns_504(settings_env):
    settings = replace(settings_env, request_timeout_seconds=1)
    app = create_app(settings, Database(settings.database_url))

    @app.get("/slow")
    async def slow():
        await asyncio.sleep(2)
        return {"ok": True}

    with TestClient(app) as client:
        response = client.get("/slow")
    assert response.status_code == 504
    assert response.json() == {"error": "Request timed out"}


def test_writes_are_not_cut_off_by_the_request_timeout(settings_env):
    settings = replace(settings_env, request_timeout_seconds=1)
    app = create_app(settings, Database(settings.database_url))

    @app.post("/slow")
    async def slow_write():
        await asyncio.sleep(2)
        return {"ok": True}

    with TestClient(app) as client:
        response = client.post("/slow")
    assert response.status_code == 200
    assert response.json() == {"ok": True}
