"""Unit tests for RefreshTokenRepository."""

from __future__ import annotations

from datetime import timedelta

import pytest
from chirpy.models.base import utcnow
from chirpy.repositories.refresh_token import RefreshTokenRepository
from tests.factories.refresh_token import RefreshTokenFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def repo(session) -> RefreshTokenRepository:
    return RefreshTokenRepository(session=session)


def test_create_and_get_by_token(repo):
    user = UserFactory()
    row = repo.create(token="a" * 64, user_id=user.id, expires_at=utcnow() + timedelta(days=1))

    assert repo.get("a" * 64) is row
    assert row.revoked_at is None


def test_get_user_for_token_applies_validity_predicate(repo):
    now = utcnow()
    active = RefreshTokenFactory()
    revoked = RefreshTokenFactory(revoked_at=now - timedelta(minutes=1))
    expired = RefreshTokenFactory(expires_at=now - timedelta(seconds=1))

    assert repo.get_user_for_token(active.token, now=now) is active.user
    assert repo.get_user_for_token(revoked.token, now=now) is None
    assert repo.get_user_for_token(expired.token, now=now) is None
    assert repo.get_user_for_token("missing", now=now) is None


def test_revoke_only_changes_active_rows(repo, session):
    rt = RefreshTokenFactory()
    now = utcnow()

    assert repo.revoke(rt.token, now=now) is True
    assert repo.revoke(rt.token, now=now) is False
    session.expire_all()
    assert rt.revoked_at is not None


def test_delete_all_counts_rows(repo):
    RefreshTokenFactory.create_batch(2)

    assert repo.delete_all() == 2
    assert repo.delete_all() == 0
