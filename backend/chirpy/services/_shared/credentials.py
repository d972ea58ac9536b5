"""
Authorization header parsing.

A header is parsed once into a tagged credential; callers then demand the
variant they accept. ``Bearer`` and ``ApiKey`` are distinct schemes and are
never interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from chirpy.services._shared.errors import UnauthorizedError

BEARER_SCHEME: Final[str] = "Bearer"
API_KEY_SCHEME: Final[str] = "ApiKey"

MISSING_HEADER_MESSAGE: Final[str] = "Authorization header missing"
MALFORMED_HEADER_MESSAGE: Final[str] = "Invalid Authorization header format"


@dataclass(frozen=True, slots=True)
class BearerCredential:
    token: str


@dataclass(frozen=True, slots=True)
class ApiKeyCredential:
    key: str


@dataclass(frozen=True, slots=True)
class MissingCredential:
    pass


@dataclass(frozen=True, slots=True)
class MalformedCredential:
    raw: str


Credential = BearerCredential | ApiKeyCredential | MissingCredential | MalformedCredential


def parse_authorization(header: str | None) -> Credential:
    """
    Split an ``Authorization`` value into ``<scheme> <credential>``.

    Exactly two space-separated parts are accepted; anything else (extra
    spaces, missing credential, unknown scheme) is malformed.

    :param header: Raw header value, ``None`` when absent.
    :returns: One of the credential variants.
    """
    if header is None or header == "":
        return MissingCredential()
    parts = header.split(" ")
    if len(parts) != 2 or not parts[1]:
        return MalformedCredential(raw=header)
    scheme, value = parts
    if scheme == BEARER_SCHEME:
        return BearerCredential(token=value)
    if scheme == API_KEY_SCHEME:
        return ApiKeyCredential(key=value)
    return MalformedCredential(raw=header)


def _reject(credential: Credential) -> UnauthorizedError:
    if isinstance(credential, MissingCredential):
        return UnauthorizedError(MISSING_HEADER_MESSAGE)
    return UnauthorizedError(MALFORMED_HEADER_MESSAGE)


def get_bearer_token(header: str | None) -> str:
    """
    Return the token of a ``Bearer`` header.

    :raises UnauthorizedError: When the header is missing or is not a
        well-formed ``Bearer`` credential.
    """
    credential = parse_authorization(header)
    if isinstance(credential, BearerCredential):
        return credential.token
    raise _reject(credential)


def get_api_key(header: str | None) -> str:
    """
    Return the key of an ``ApiKey`` header.

    :raises UnauthorizedError: When the header is missing or is not a
        well-formed ``ApiKey`` credential.
    """
    credential = parse_authorization(header)
    if isinstance(credential, ApiKeyCredential):
        return credential.key
    raise _reject(credential)
