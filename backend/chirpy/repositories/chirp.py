"""Chirp repository: persistence for short posts."""

from __future__ import annotations

import uuid

from chirpy.models.chirp import Chirp
from chirpy.repositories.base import BaseRepository


class ChirpRepository(BaseRepository[Chirp]):
    """Persistence-only repository for :class:`Chirp`."""

    model = Chirp

    def _sortable_fields(self):
        return {"created_at": Chirp.created_at}

    def _filterable_fields(self):
        return {"user_id": Chirp.user_id}

    def list_for_feed(self, *, author_id: uuid.UUID | None = None, descending: bool = False) -> list[Chirp]:
        """List chirps ordered by creation time, optionally for one author.

        :param author_id: Restrict to chirps by this user when given.
        :param descending: Newest first when ``True``.
        :returns: Matching chirps.
        """
        filters = {"user_id": author_id} if author_id is not None else None
        token = "-created_at" if descending else "created_at"
        return self.list(filters=filters, sort=[token])
