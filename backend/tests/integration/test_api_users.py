"""Integration tests for account endpoints."""

from __future__ import annotations

from freezegun import freeze_time
from tests.helpers.api import login, register, signup_and_login
from tests.helpers.auth import access_token_for, bearer

USER_KEYS = {"id", "createdAt", "updatedAt", "email", "isChirpyRed"}


def test_create_user_returns_public_fields(client):
    resp = client.post("/api/users", json={"email": "walt@example.com", "password": "04234"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert set(body) == USER_KEYS
    assert body["email"] == "walt@example.com"
    assert body["isChirpyRed"] is False


def test_create_user_duplicate_email(client):
    register(client, "walt@example.com")

    resp = client.post("/api/users", json={"email": "walt@example.com", "password": "other"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "User with this email already exists"}


def test_create_user_validates_payload(client):
    missing = client.post("/api/users", json={"email": "walt@example.com"})
    wrong_type = client.post("/api/users", json={"email": "walt@example.com", "password": 42})
    not_json = client.post("/api/users", data="email=walt", content_type="text/plain")

    for resp in (missing, wrong_type, not_json):
        assert resp.status_code == 400
        assert "error" in resp.get_json()
    assert missing.get_json()["error"].startswith("password:")


def test_update_user_replaces_credentials(client):
    session = signup_and_login(client, "walt@example.com")

    resp = client.put(
        "/api/users",
        json={"email": "heisenberg@example.com", "password": "blue"},
        headers=bearer(session["token"]),
    )

    assert resp.status_code == 200
    assert resp.get_json()["email"] == "heisenberg@example.com"
    assert resp.get_json()["id"] == session["id"]
    assert login(client, "heisenberg@example.com", "blue")["id"] == session["id"]
    assert client.post("/api/login", json={"email": "walt@example.com", "password": "04234"}).status_code == 401


def test_update_user_requires_access_token(client):
    payload = {"email": "a@example.com", "password": "x"}

    missing = client.put("/api/users", json=payload)
    malformed = client.put("/api/users", json=payload, headers={"Authorization": "Bearer"})
    garbage = client.put("/api/users", json=payload, headers=bearer("garbage"))

    assert missing.status_code == 401
    assert missing.get_json() == {"error": "Authorization header missing"}
    assert malformed.status_code == 401
    assert malformed.get_json() == {"error": "Invalid Authorization header format"}
    assert garbage.status_code == 401


def test_update_user_rejects_expired_token(app, client):
    user = register(client, "walt@example.com")
    with freeze_time("2026-01-01 00:00:00"):
        token = access_token_for(app, user["id"], lifetime_seconds=60)

    with freeze_time("2026-01-01 00:01:00"):
        resp = client.put(
            "/api/users", json={"email": "x@example.com", "password": "x"}, headers=bearer(token)
        )

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Token has expired"}


def test_update_user_email_taken(client):
    register(client, "jesse@example.com")
    session = signup_and_login(client, "walt@example.com")

    resp = client.put(
        "/api/users",
        json={"email": "jesse@example.com", "password": "x"},
        headers=bearer(session["token"]),
    )

    assert resp.status_code == 400
