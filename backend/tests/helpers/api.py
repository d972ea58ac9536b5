"""Thin wrappers around the JSON API used by integration tests."""

from __future__ import annotations

from typing import Any

from tests.helpers.auth import bearer

DEFAULT_PASSWORD = "04234"


def register(client, email: str, password: str = DEFAULT_PASSWORD) -> dict[str, Any]:
    """Create an account through ``POST /api/users`` and return its JSON."""
    resp = client.post("/api/users", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def login(client, email: str, password: str = DEFAULT_PASSWORD, **extra: Any) -> dict[str, Any]:
    resp = client.post("/api/login", json={"email": email, "password": password, **extra})
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def signup_and_login(client, email: str, password: str = DEFAULT_PASSWORD) -> dict[str, Any]:
    """Register then log in; the returned JSON holds the user plus both tokens."""
    register(client, email, password)
    return login(client, email, password)


def post_chirp(client, token: str, body: str) -> dict[str, Any]:
    resp = client.post("/api/chirps", json={"body": body}, headers=bearer(token))
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()
