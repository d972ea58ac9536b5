# chirpy/infra/jwt/access_token_codec.py
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Final

import jwt

from chirpy.services._shared.errors import UnauthorizedError
from chirpy.services._shared.ports import AccessTokenCodec

ISSUER: Final[str] = "chirpy"
ALGORITHM: Final[str] = "HS256"
REQUIRED_CLAIMS: Final[list[str]] = ["iss", "sub", "iat", "exp"]


def make_jwt(subject: str, lifetime_seconds: int, secret: str) -> str:
    """
    Sign an access token for ``subject``.

    Claims: ``iss="chirpy"``, ``sub``, ``iat`` (now, epoch seconds),
    ``exp = iat + lifetime_seconds`` and a random ``jti`` so two tokens
    minted in the same second still differ.

    :param subject: User identifier (stringified UUID).
    :param lifetime_seconds: Validity window in seconds.
    :param secret: HMAC key.
    :returns: Compact JWS string.
    """
    issued_at = int(datetime.now(UTC).timestamp())
    payload: dict[str, Any] = {
        "iss": ISSUER,
        "sub": str(subject),
        "iat": issued_at,
        "exp": issued_at + int(lifetime_seconds),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def validate_jwt(token: str, secret: str) -> str:
    """
    Verify ``token`` and return its subject.

    :raises UnauthorizedError: On a bad signature, at or after ``exp``, a
        structurally invalid token, a foreign issuer, or a missing or
        non-string ``sub``.
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            issuer=ISSUER,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedError("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise UnauthorizedError("Invalid token") from exc

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        raise UnauthorizedError("Invalid token")
    return subject


@dataclass(frozen=True, slots=True)
class JWTAccessTokenCodec(AccessTokenCodec):
    """
    HS256 adapter for the :class:`AccessTokenCodec` port.

    :param secret: Signing key (``JWT_SECRET``).
    """

    secret: str

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("JWT secret must not be empty.")

    def issue(self, subject: str, lifetime_seconds: int) -> str:
        return make_jwt(subject, lifetime_seconds, self.secret)

    def verify(self, token: str) -> str:
        return validate_jwt(token, self.secret)
