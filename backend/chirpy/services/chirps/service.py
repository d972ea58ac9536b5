"""
ChirpService
============

Posting, listing and deleting chirps. Bodies are length-checked and run
through a small profanity filter before they are stored.
"""

from __future__ import annotations

import uuid
from typing import Final

from chirpy.models.chirp import MAX_CHIRP_LENGTH
from chirpy.repositories.chirp import ChirpRepository
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import BadRequestError, NotFoundError
from chirpy.services.chirps.dto import ChirpCreateIn, ChirpListIn, ChirpOut

PROFANE_WORDS: Final[frozenset[str]] = frozenset({"kerfuffle", "sharbert", "fornax"})
CENSOR: Final[str] = "****"


def clean_profanity(text: str) -> str:
    """
    Replace banned words with ``****``.

    Words are split on single spaces and compared case-insensitively; a word
    with punctuation attached (``"fornax!"``) is left alone.
    """
    return " ".join(CENSOR if word.lower() in PROFANE_WORDS else word for word in text.split(" "))


class ChirpService(BaseService):
    """Application service for the `Chirp` aggregate."""

    def create_chirp(self, author_id: uuid.UUID, dto: ChirpCreateIn) -> ChirpOut:
        """
        Validate, clean and store a chirp for ``author_id``.

        :raises BadRequestError: If the body is empty or longer than 140 characters.
        :raises NotFoundError: If the author no longer exists.
        """
        if not dto.body:
            raise BadRequestError("Invalid request body")
        if len(dto.body) > MAX_CHIRP_LENGTH:
            raise BadRequestError(f"Chirp is too long. Max length is {MAX_CHIRP_LENGTH}")

        with self.rw_uow() as uow:
            if uow.users.get(author_id) is None:
                raise NotFoundError("User", author_id)
            repo: ChirpRepository = uow.chirps
            chirp = repo.add(repo.model(body=clean_profanity(dto.body), user_id=author_id))
            return ChirpOut.from_model(chirp)

    def list_chirps(self, dto: ChirpListIn | None = None) -> list[ChirpOut]:
        """Return chirps ordered by creation time, optionally for one author."""
        dto = dto or ChirpListIn()
        with self.ro_uow() as uow:
            chirps = uow.chirps.list_for_feed(
                author_id=dto.author_id, descending=dto.sort == "desc"
            )
            return [ChirpOut.from_model(c) for c in chirps]

    def get_chirp(self, chirp_id: uuid.UUID) -> ChirpOut:
        """
        :raises NotFoundError: If the chirp does not exist.
        """
        with self.ro_uow() as uow:
            chirp = uow.chirps.get(chirp_id)
            if chirp is None:
                raise NotFoundError("Chirp", chirp_id)
            return ChirpOut.from_model(chirp)

    def delete_chirp(self, actor_id: uuid.UUID, chirp_id: uuid.UUID) -> None:
        """
        Delete a chirp on behalf of its author.

        :raises NotFoundError: If the chirp does not exist.
        :raises ForbiddenError: If ``actor_id`` is not the author.
        """
        with self.rw_uow() as uow:
            chirp = uow.chirps.get(chirp_id)
            if chirp is None:
                raise NotFoundError("Chirp", chirp_id)
            self.ensure_owner(actor_id, chirp.user_id, msg="You can't delete this chirp")
            uow.chirps.delete(chirp)
