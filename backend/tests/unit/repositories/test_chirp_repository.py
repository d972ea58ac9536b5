"""Unit tests for ChirpRepository."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from chirpy.repositories.base import parse_sort_tokens
from chirpy.repositories.chirp import ChirpRepository
from tests.factories.chirp import ChirpFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def repo(session) -> ChirpRepository:
    return ChirpRepository(session=session)


def test_list_for_feed_sorts_by_created_at(repo):
    base = datetime(2026, 2, 1, tzinfo=UTC)
    newer = ChirpFactory(created_at=base + timedelta(hours=1))
    older = ChirpFactory(created_at=base)

    assert repo.list_for_feed() == [older, newer]
    assert repo.list_for_feed(descending=True) == [newer, older]


def test_list_for_feed_filters_by_author(repo):
    author = UserFactory()
    mine = ChirpFactory(author=author)
    ChirpFactory()

    assert repo.list_for_feed(author_id=author.id) == [mine]


def test_parse_sort_tokens():
    assert parse_sort_tokens(["-created_at", " body ", "-", ""]) == [
        ("created_at", True),
        ("body", False),
    ]


def test_list_ignores_unknown_filters_and_sort_keys(repo):
    chirp = ChirpFactory()

    assert repo.list(filters={"body": "nope"}, sort=["-body"]) == [chirp]
