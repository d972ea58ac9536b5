"""Unit tests for AdminService and the hit counter."""

from __future__ import annotations

import threading

import pytest
from chirpy.infra.sqlalchemy.refresh_token_store import SQLAlchemyRefreshTokenStore
from chirpy.models import Chirp, RefreshToken, User
from chirpy.services._shared.errors import ForbiddenError
from chirpy.services.admin.hit_counter import HitCounter
from chirpy.services.admin.service import AdminService
from tests.factories.chirp import ChirpFactory
from tests.factories.refresh_token import RefreshTokenFactory


def _service(platform: str = "dev", counter: HitCounter | None = None) -> AdminService:
    return AdminService(
        counter=counter or HitCounter(),
        refresh_store=SQLAlchemyRefreshTokenStore(),
        platform=platform,
    )


def test_hit_counter_is_thread_safe():
    counter = HitCounter()

    def _hit():
        for _ in range(500):
            counter.increment()

    threads = [threading.Thread(target=_hit) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter.value == 4000
    counter.reset()
    assert counter.value == 0


def test_metrics_reads_the_counter():
    counter = HitCounter()
    counter.increment()
    counter.increment()

    assert _service(counter=counter).metrics() == 2


def test_reset_wipes_everything_on_dev(session):
    counter = HitCounter()
    counter.increment()
    ChirpFactory.create_batch(2)
    RefreshTokenFactory()

    result = _service(counter=counter).reset()

    assert (result.refresh_tokens, result.chirps) == (1, 2)
    assert result.users == 3
    assert counter.value == 0
    for model in (User, Chirp, RefreshToken):
        assert session.query(model).count() == 0


@pytest.mark.parametrize("platform", ["production", "staging", ""])
def test_reset_is_forbidden_outside_dev(session, platform):
    ChirpFactory()

    with pytest.raises(ForbiddenError):
        _service(platform=platform).reset()
    assert session.query(Chirp).count() == 1
