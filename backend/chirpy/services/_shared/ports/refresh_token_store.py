from __future__ import annotations

import secrets
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from chirpy.services._shared.dto import UserOut

UserLoader = Callable[[uuid.UUID], UserOut | None]

REFRESH_TOKEN_BYTES = 32


def generate_refresh_token() -> str:
    """Return 256 bits of CSPRNG output as a 64-char hex string."""
    return secrets.token_hex(REFRESH_TOKEN_BYTES)


class RefreshTokenStore(Protocol):
    """
    Stateful store for refresh tokens.

    A token is usable iff it exists, is not revoked and ``now < expires_at``;
    the check happens at resolution time so a committed revoke is always seen.
    Revocation is idempotent and never raises for unknown tokens.
    """

    def new_token(self) -> str:
        """Generate a new random refresh token."""
        return generate_refresh_token()

    def issue(self, *, token: str, user_id: uuid.UUID, expires_at: datetime) -> None:
        """Persist a new, unrevoked token for ``user_id``."""

    def resolve_user(self, token: str, *, now: datetime) -> UserOut | None:
        """Return the owner of ``token`` when usable, otherwise ``None``."""

    def revoke(self, token: str, *, now: datetime) -> bool:
        """Stamp the token revoked. :returns: True if a usable row changed."""

    def purge_all(self) -> int:
        """Delete every stored token. :returns: Number of tokens removed."""
