"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between
repositories, domain models, and application services.

The translation to HTTP responses is handled by ``chirpy/core/errors.py``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_users_email').

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.

    Notes
    -----
    PostgreSQL reports the constraint name; SQLite reports ``table.column``
    instead, so callers usually pass both spellings through ``any()``.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    - ``chirpy.core.errors`` maps each subclass to a status code.
    """

    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class BadRequestError(ServiceError):
    """Raised when input is well-formed but violates a business rule."""


class UnauthorizedError(ServiceError):
    """Raised when a credential is missing, malformed, expired or wrong."""

    default_message = "Unauthorized"


class ForbiddenError(ServiceError):
    """Raised when a valid identity is not allowed to perform an action."""

    default_message = "Forbidden"


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: object

    def __post_init__(self) -> None:
        ServiceError.__init__(self, f"{self.entity} not found")

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"
