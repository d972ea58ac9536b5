"""Integration tests for chirp endpoints."""

from __future__ import annotations

import uuid

import pytest
from tests.helpers.api import post_chirp, signup_and_login
from tests.helpers.auth import bearer

CHIRP_KEYS = {"id", "createdAt", "updatedAt", "body", "userId"}


@pytest.fixture()
def walt(client):
    return signup_and_login(client, "walt@example.com")


@pytest.fixture()
def jesse(client):
    return signup_and_login(client, "jesse@example.com")


def test_create_chirp(client, walt):
    resp = client.post(
        "/api/chirps", json={"body": "This is a kerfuffle opinion"}, headers=bearer(walt["token"])
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert set(body) == CHIRP_KEYS
    assert body["body"] == "This is a **** opinion"
    assert body["userId"] == walt["id"]


def test_create_chirp_requires_auth(client):
    resp = client.post("/api/chirps", json={"body": "hello"})

    assert resp.status_code == 401


def test_create_chirp_too_long(client, walt):
    resp = client.post("/api/chirps", json={"body": "x" * 141}, headers=bearer(walt["token"]))

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Chirp is too long. Max length is 140"}


@pytest.mark.parametrize("payload", [{}, {"body": 5}, {"body": ""}])
def test_create_chirp_invalid_body(client, walt, payload):
    resp = client.post("/api/chirps", json=payload, headers=bearer(walt["token"]))

    assert resp.status_code == 400


def test_list_chirps_sorting_and_author_filter(client, walt, jesse):
    first = post_chirp(client, walt["token"], "one")
    second = post_chirp(client, jesse["token"], "two")
    third = post_chirp(client, walt["token"], "three")

    ascending = client.get("/api/chirps").get_json()
    descending = client.get("/api/chirps?sort=desc").get_json()
    by_walt = client.get(f"/api/chirps?authorId={walt['id']}").get_json()

    assert [c["id"] for c in ascending] == [first["id"], second["id"], third["id"]]
    assert [c["id"] for c in descending] == [third["id"], second["id"], first["id"]]
    assert [c["body"] for c in by_walt] == ["one", "three"]


def test_list_chirps_empty(client):
    resp = client.get("/api/chirps")

    assert resp.status_code == 200
    assert resp.get_json() == []


@pytest.mark.parametrize("query", ["sort=sideways", "authorId=not-a-uuid"])
def test_list_chirps_bad_query(client, query):
    assert client.get(f"/api/chirps?{query}").status_code == 400


def test_get_chirp(client, walt):
    chirp = post_chirp(client, walt["token"], "hello")

    resp = client.get(f"/api/chirps/{chirp['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == chirp


def test_get_missing_chirp(client):
    missing = client.get(f"/api/chirps/{uuid.uuid4()}")
    malformed = client.get("/api/chirps/not-a-uuid")

    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Chirp not found"}
    assert malformed.status_code == 404


def test_delete_chirp_ownership(client, walt, jesse):
    chirp = post_chirp(client, walt["token"], "mine")

    forbidden = client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(jesse["token"]))
    assert forbidden.status_code == 403
    assert client.get(f"/api/chirps/{chirp['id']}").status_code == 200

    deleted = client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(walt["token"]))
    assert deleted.status_code == 204
    assert client.get(f"/api/chirps/{chirp['id']}").status_code == 404


def test_delete_requires_auth_and_existing_chirp(client, walt):
    assert client.delete(f"/api/chirps/{uuid.uuid4()}").status_code == 401
    assert client.delete(f"/api/chirps/{uuid.uuid4()}", headers=bearer(walt["token"])).status_code == 404
