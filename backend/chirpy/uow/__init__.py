"""Transactional scopes used by the service layer."""

from .sqlalchemy_uow import ChirpyRepositories, SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork

__all__ = [
    "ChirpyRepositories",
    "SQLAlchemyUnitOfWork",
    "SQLAlchemyReadOnlyUnitOfWork",
]
