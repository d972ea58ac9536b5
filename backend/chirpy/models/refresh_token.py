"""Persisted refresh tokens backing the stateful half of a session."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirpy.core.extensions import db

from .base import TimestampMixin, UTCDateTime

if TYPE_CHECKING:
    from .user import User


class RefreshToken(TimestampMixin, db.Model):
    """
    Opaque bearer secret that can mint new access tokens.

    Fields
    ------
    token : str
        Random hex string; also the primary key.
    user_id : uuid.UUID
        Owner. Cascades on user deletion.
    expires_at : datetime
        Absolute expiry set at issuance.
    revoked_at : datetime | None
        Set once on revocation, never cleared.

    Notes
    -----
    A token is usable iff ``revoked_at IS NULL AND expires_at > now``.
    """

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    revoked_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    user: Mapped[User] = relationship(back_populates="refresh_tokens", lazy="raise_on_sql")

    __table_args__ = (Index("ix_refresh_tokens_user_id", "user_id"),)

    def __repr__(self) -> str:
        return f"<RefreshToken user_id={self.user_id} revoked={self.revoked_at is not None}>"
