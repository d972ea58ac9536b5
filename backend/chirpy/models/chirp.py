"""Chirp model: a short text post authored by a user."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirpy.core.extensions import db

from .base import ReprMixin, TimestampMixin, UUIDPKMixin

if TYPE_CHECKING:
    from .user import User

MAX_CHIRP_LENGTH = 140


class Chirp(UUIDPKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Public post of at most :data:`MAX_CHIRP_LENGTH` characters.

    Deleting the author removes their chirps (``ON DELETE CASCADE``).
    """

    __tablename__ = "chirps"

    body: Mapped[str] = mapped_column(String(MAX_CHIRP_LENGTH), nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    author: Mapped[User] = relationship(back_populates="chirps", lazy="raise_on_sql")

    __table_args__ = (
        Index("ix_chirps_user_id", "user_id"),
        Index("ix_chirps_created_at", "created_at"),
    )
