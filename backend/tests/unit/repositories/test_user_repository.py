"""Unit tests for UserRepository."""

from __future__ import annotations

import uuid

import pytest
from chirpy.repositories.user import UserRepository
from tests.factories.user import DEFAULT_PASSWORD, UserFactory


@pytest.fixture()
def repo(session) -> UserRepository:
    return UserRepository(session=session)


def test_get_by_email_is_case_insensitive(repo):
    user = UserFactory(email="hank@example.com")

    assert repo.get_by_email("HANK@example.com ") is user
    assert repo.exists_by_email("hank@example.com") is True
    assert repo.exists_by_email("marie@example.com") is False


def test_authenticate(repo):
    user = UserFactory(email="hank@example.com")

    assert repo.authenticate("hank@example.com", DEFAULT_PASSWORD) is user
    assert repo.authenticate("hank@example.com", "minerals") is None
    assert repo.authenticate("nobody@example.com", DEFAULT_PASSWORD) is None


def test_update_only_accepts_whitelisted_fields(repo):
    user = UserFactory()

    with pytest.raises(ValueError):
        repo.update(user, is_chirpy_red=True)

    repo.update(user, email="new@example.com", password="fresh")
    assert user.email == "new@example.com"
    assert user.verify_password("fresh")


def test_mark_chirpy_red(repo):
    user = UserFactory()

    assert repo.mark_chirpy_red(user.id) is True
    assert user.is_chirpy_red is True
    assert repo.mark_chirpy_red(uuid.uuid4()) is False
