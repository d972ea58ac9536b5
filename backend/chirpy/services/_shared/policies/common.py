from __future__ import annotations

import hmac

from chirpy.core.config import DEV_PLATFORM
from chirpy.services._shared.errors import ForbiddenError, UnauthorizedError


def is_owner(*, actor_id, owner_id) -> bool:
    """Return True if the actor owns the resource."""
    return actor_id is not None and str(actor_id) == str(owner_id)


def ensure_owner(actor_id, owner_id, *, msg: str | None = None) -> None:
    """
    Require the acting identity to be the resource owner.

    :raises ForbiddenError: On mismatch.
    """
    if not is_owner(actor_id=actor_id, owner_id=owner_id):
        raise ForbiddenError(msg or "You can't modify a resource you don't own")


def ensure_api_key(provided: str, expected: str) -> None:
    """
    Compare a presented API key with the configured one in constant time.

    :raises UnauthorizedError: On mismatch or when no key is configured.
    """
    if not expected or not hmac.compare_digest(provided.encode(), expected.encode()):
        raise UnauthorizedError("Invalid API key")


def ensure_dev_platform(platform: str | None) -> None:
    """
    Gate destructive operations on the deployment platform.

    :raises ForbiddenError: Unless ``platform`` is the development marker.
    """
    if platform != DEV_PLATFORM:
        raise ForbiddenError("This endpoint is only available in development")
