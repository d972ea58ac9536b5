"""
chirpy.services._shared.ports
=============================

Collection of *ports* (hexagonal interfaces) that define the contracts
for session token infrastructure.

Modules
-------
- :mod:`token_codec`:
    Defines :class:`~.AccessTokenCodec`, which issues and verifies signed access tokens.

- :mod:`refresh_token_store`:
    Defines :class:`~.RefreshTokenStore`, covering persistence and revocation of
    opaque refresh tokens.

Concrete adapters (JWT, SQLAlchemy, Redis) live under ``chirpy.infra``.
"""

from __future__ import annotations

from .refresh_token_store import (
    RefreshTokenStore,
    UserLoader,
    generate_refresh_token,
)
from .token_codec import AccessTokenCodec

__all__ = [
    "AccessTokenCodec",
    "RefreshTokenStore",
    "UserLoader",
    "generate_refresh_token",
]
