"""DTOs for ChirpService."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from chirpy.models.chirp import Chirp

SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True, slots=True)
class ChirpCreateIn:
    """
    Input DTO for posting a chirp.

    :param body: Raw text as submitted.
    :type body: str
    """

    body: str


@dataclass(frozen=True, slots=True)
class ChirpListIn:
    """
    Listing filter.

    :param author_id: Only chirps by this user when set.
    :type author_id: uuid.UUID | None
    :param sort: ``"asc"`` (oldest first, default) or ``"desc"``.
    :type sort: str
    """

    author_id: uuid.UUID | None = None
    sort: SortOrder = "asc"


@dataclass(frozen=True, slots=True)
class ChirpOut:
    id: uuid.UUID
    body: str
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, chirp: Chirp) -> ChirpOut:
        return cls(
            id=chirp.id,
            body=chirp.body,
            user_id=chirp.user_id,
            created_at=chirp.created_at,
            updated_at=chirp.updated_at,
        )
