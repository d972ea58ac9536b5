from __future__ import annotations

from typing import Protocol


class AccessTokenCodec(Protocol):
    """Port for issuing and verifying stateless access tokens."""

    def issue(self, subject: str, lifetime_seconds: int) -> str:
        """Sign a token for ``subject`` valid for ``lifetime_seconds``."""
        ...

    def verify(self, token: str) -> str:
        """
        Return the subject of a valid token.

        :raises UnauthorizedError: When the token is forged, expired or malformed.
        """
        ...
