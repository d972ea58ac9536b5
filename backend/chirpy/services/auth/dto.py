# chirpy/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from chirpy.services._shared.dto import UserOut

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email.
    :type email: str | None
    :param password: Raw password (to be verified).
    :type password: str | None
    :param expires_in_seconds: Optional caller-requested access lifetime.
    :type expires_in_seconds: int | None
    """

    email: str | None
    password: str | None
    expires_in_seconds: int | None = None


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for minting an access token from a refresh token.

    :param refresh_token: Opaque refresh token.
    :type refresh_token: str
    """

    refresh_token: str


@dataclass(frozen=True, slots=True)
class RevokeIn:
    refresh_token: str


@dataclass(frozen=True, slots=True)
class CredentialsUpdateIn:
    """
    Input DTO for replacing a user's email and password.

    :param email: New login email.
    :type email: str
    :param password: New raw password.
    :type password: str
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SessionOut:
    """
    Output DTO of a successful login.

    :param user: Authenticated user snapshot.
    :type user: UserOut
    :param access_token: Signed access JWT.
    :type access_token: str
    :param refresh_token: Opaque refresh token.
    :type refresh_token: str
    """

    user: UserOut
    access_token: str
    refresh_token: str


@dataclass(frozen=True, slots=True)
class AccessTokenOut:
    access_token: str


# ------------------------ Config DTO --------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_ttl_seconds: Access token lifetime and ceiling.
    :type access_ttl_seconds: int
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    :param allow_caller_requested_lifetime: Honour ``expires_in_seconds`` at login.
    :type allow_caller_requested_lifetime: bool
    """

    access_ttl_seconds: int = 3600
    refresh_expires: timedelta = timedelta(days=60)
    allow_caller_requested_lifetime: bool = True
