"""Administrative operations: metrics and development-only reset."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chirpy.services._shared.base import BaseService
from chirpy.services._shared.policies import ensure_dev_platform
from chirpy.services._shared.ports import RefreshTokenStore
from chirpy.services.admin.hit_counter import HitCounter

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResetOut:
    refresh_tokens: int
    chirps: int
    users: int


class AdminService(BaseService):
    """
    Expose the hit counter and wipe all data on development deployments.

    :param counter: Application-owned hit counter.
    :param refresh_store: Store whose tokens are purged on reset.
    :param platform: Deployment marker from configuration.
    """

    def __init__(self, *, counter: HitCounter, refresh_store: RefreshTokenStore, platform: str) -> None:
        super().__init__()
        self.counter = counter
        self.refresh_store = refresh_store
        self.platform = platform

    def metrics(self) -> int:
        """Return the number of static web-app hits since start or last reset."""
        return self.counter.value

    def reset(self) -> ResetOut:
        """
        Delete every refresh token, chirp and user, and zero the hit counter.

        :raises ForbiddenError: Unless running on the development platform.
        """
        ensure_dev_platform(self.platform)

        tokens = self.refresh_store.purge_all()
        with self.rw_uow() as uow:
            chirps = uow.chirps.delete_all()
            users = uow.users.delete_all()
        self.counter.reset()

        log.warning(
            "admin reset: removed %s refresh tokens, %s chirps, %s users", tokens, chirps, users
        )
        return ResetOut(refresh_tokens=tokens, chirps=chirps, users=users)
