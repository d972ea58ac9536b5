"""Integration tests for login, refresh and revoke."""

from __future__ import annotations

import pytest
from tests.helpers.api import login, register, signup_and_login
from tests.helpers.auth import bearer


def test_login_returns_user_and_tokens(client):
    user = register(client, "walt@example.com")

    body = login(client, "walt@example.com")

    assert {k: body[k] for k in ("id", "email", "isChirpyRed")} == {
        "id": user["id"],
        "email": "walt@example.com",
        "isChirpyRed": False,
    }
    assert body["token"].count(".") == 2
    assert len(body["refreshToken"]) == 64


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "walt@example.com", "password": "wrong"},
        {"email": "nobody@example.com", "password": "04234"},
        {"email": "walt@example.com"},
        {"email": 123, "password": "x"},
        {"email": "walt@example.com", "password": ["04234"]},
        ["a"],
        {},
    ],
)
def test_login_failures_share_one_message(client, payload):
    register(client, "walt@example.com")

    resp = client.post("/api/login", json=payload)

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Incorrect email or password"}


@pytest.mark.parametrize("expires", ["abc", 0, -10, 1.5])
def test_login_rejects_bad_expires_in_seconds(client, expires):
    register(client, "walt@example.com")

    resp = client.post(
        "/api/login",
        json={"email": "walt@example.com", "password": "04234", "expiresInSeconds": expires},
    )

    assert resp.status_code == 400


def test_login_accepts_requested_lifetime(client):
    register(client, "walt@example.com")

    body = login(client, "walt@example.com", expiresInSeconds=120)

    assert body["token"]


def test_refresh_issues_working_access_token(client):
    session = signup_and_login(client, "walt@example.com")

    resp = client.post("/api/refresh", headers=bearer(session["refreshToken"]))

    assert resp.status_code == 200
    token = resp.get_json()["token"]
    assert token != session["token"]
    update = client.put(
        "/api/users", json={"email": "walt@example.com", "password": "new"}, headers=bearer(token)
    )
    assert update.status_code == 200


def test_refresh_token_is_not_rotated(client):
    session = signup_and_login(client, "walt@example.com")

    for _ in range(2):
        assert client.post("/api/refresh", headers=bearer(session["refreshToken"])).status_code == 200


def test_refresh_rejects_unknown_and_access_tokens(client):
    session = signup_and_login(client, "walt@example.com")

    unknown = client.post("/api/refresh", headers=bearer("0" * 64))
    access = client.post("/api/refresh", headers=bearer(session["token"]))
    missing = client.post("/api/refresh")

    for resp in (unknown, access, missing):
        assert resp.status_code == 401


def test_refresh_token_is_not_an_access_token(client):
    session = signup_and_login(client, "walt@example.com")

    resp = client.post("/api/chirps", json={"body": "hi"}, headers=bearer(session["refreshToken"]))

    assert resp.status_code == 401


def test_revoke_ends_the_session(client):
    session = signup_and_login(client, "walt@example.com")
    headers = bearer(session["refreshToken"])

    first = client.post("/api/revoke", headers=headers)
    second = client.post("/api/revoke", headers=headers)

    assert first.status_code == 204
    assert first.data == b""
    assert second.status_code == 204
    assert client.post("/api/refresh", headers=headers).status_code == 401


def test_revoke_does_not_touch_other_sessions(client):
    register(client, "walt@example.com")
    one = login(client, "walt@example.com")
    two = login(client, "walt@example.com")

    client.post("/api/revoke", headers=bearer(one["refreshToken"]))

    assert client.post("/api/refresh", headers=bearer(two["refreshToken"])).status_code == 200


def test_revoke_unknown_token_is_accepted(client):
    assert client.post("/api/revoke", headers=bearer("f" * 64)).status_code == 204


def test_revoke_requires_bearer_header(client):
    resp = client.post("/api/revoke", headers={"Authorization": "ApiKey abc"})

    assert resp.status_code == 401
