"""Read models shared by several services and ports."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chirpy.models.user import User


@dataclass(frozen=True, slots=True)
class UserOut:
    """
    Public-safe snapshot of a user account.

    :param id: User identifier.
    :type id: uuid.UUID
    :param email: Normalized login email.
    :type email: str
    :param is_chirpy_red: Premium tier flag.
    :type is_chirpy_red: bool
    :param created_at: Creation timestamp.
    :type created_at: datetime
    :param updated_at: Last update timestamp.
    :type updated_at: datetime
    """

    id: uuid.UUID
    email: str
    is_chirpy_red: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: User) -> UserOut:
        return cls(
            id=user.id,
            email=user.email,
            is_chirpy_red=bool(user.is_chirpy_red),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
