"""Refresh-token repository with single-statement validity and revoke queries."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import cast

from sqlalchemy import select, update

from chirpy.models.refresh_token import RefreshToken
from chirpy.models.user import User
from chirpy.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    """Persistence-only repository for :class:`RefreshToken`.

    Validity (``revoked_at IS NULL AND expires_at > now``) is always evaluated
    inside the query so a revoke committed by another request is observed.
    """

    model = RefreshToken

    def _pk_attr(self):
        return RefreshToken.token

    def create(self, *, token: str, user_id: uuid.UUID, expires_at: datetime) -> RefreshToken:
        """Insert a fresh, unrevoked token row."""
        return self.add(RefreshToken(token=token, user_id=user_id, expires_at=expires_at))

    def get_user_for_token(self, token: str, *, now: datetime) -> User | None:
        """Return the owner of ``token`` if the token is currently usable.

        :param token: Raw refresh token.
        :param now: Reference time for the expiry comparison.
        :returns: Owning user or ``None`` (unknown, revoked or expired).
        """
        stmt = (
            select(User)
            .join(RefreshToken, RefreshToken.user_id == User.id)
            .where(
                RefreshToken.token == token,
                RefreshToken.revoked_at.is_(None),
                RefreshToken.expires_at > now,
            )
        )
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def revoke(self, token: str, *, now: datetime) -> bool:
        """Stamp ``revoked_at`` on an active token.

        :returns: ``True`` when a row changed; ``False`` for unknown or
            already-revoked tokens.
        """
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token == token, RefreshToken.revoked_at.is_(None))
            .values(revoked_at=now, updated_at=now)
        )
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        return bool(result.rowcount)
