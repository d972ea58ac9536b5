"""Common base for Chirpy application services."""

from __future__ import annotations

from datetime import UTC, datetime

from chirpy.services._shared.policies import ensure_owner
from chirpy.uow.sqlalchemy_uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork


class BaseService:
    """
    Base class for application services.

    Services open a unit of work per use case, raise ``ServiceError``
    subclasses and return DTOs; they never see Flask, HTTP or a live ORM
    object outside their unit of work. HTTP translation happens in
    ``chirpy.core.errors``.
    """

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        :returns: A unit of work that commits on success.
        :rtype: SQLAlchemyUnitOfWork
        """
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        :returns: A unit of work that refuses writes and never commits.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork()

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(UTC)

    def ensure_owner(self, actor_id, owner_id, *, msg: str | None = None) -> None:
        """
        Ensure the current actor is the resource owner.

        :raises ForbiddenError: If actor is not the owner.
        """
        ensure_owner(actor_id, owner_id, msg=msg)
