"""Relational refresh token store (default backend)."""

from __future__ import annotations

import uuid
from datetime import datetime

from chirpy.services._shared.dto import UserOut
from chirpy.services._shared.ports import RefreshTokenStore
from chirpy.uow.sqlalchemy_uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork


class SQLAlchemyRefreshTokenStore(RefreshTokenStore):
    """
    Store refresh tokens in the ``refresh_tokens`` table.

    Each call runs in its own unit of work. Resolution is a single
    ``SELECT ... JOIN users`` carrying the validity predicate and revocation is
    a single conditional ``UPDATE``, so the database row is the only
    synchronisation point between concurrent requests.
    """

    def issue(self, *, token: str, user_id: uuid.UUID, expires_at: datetime) -> None:
        with SQLAlchemyUnitOfWork() as uow:
            uow.refresh_tokens.create(token=token, user_id=user_id, expires_at=expires_at)

    def resolve_user(self, token: str, *, now: datetime) -> UserOut | None:
        with SQLAlchemyReadOnlyUnitOfWork() as uow:
            user = uow.refresh_tokens.get_user_for_token(token, now=now)
            return UserOut.from_model(user) if user is not None else None

    def revoke(self, token: str, *, now: datetime) -> bool:
        with SQLAlchemyUnitOfWork() as uow:
            return uow.refresh_tokens.revoke(token, now=now)

    def purge_all(self) -> int:
        with SQLAlchemyUnitOfWork() as uow:
            return uow.refresh_tokens.delete_all()
