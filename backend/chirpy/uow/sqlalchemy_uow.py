"""
Units of work over the Flask-scoped SQLAlchemy session.

Services open one per use case: :class:`SQLAlchemyUnitOfWork` for writes
(registration, posting and deleting chirps, issuing and revoking refresh
tokens, admin reset) and :class:`SQLAlchemyReadOnlyUnitOfWork` for lookups
(login, chirp feeds, refresh token resolution). Both expose ``users``,
``chirps`` and ``refresh_tokens`` repositories bound to one session.
"""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import Final

from sqlalchemy import event
from sqlalchemy.engine import Connection
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import Session

from chirpy.core.extensions import db
from chirpy.repositories import ChirpRepository, RefreshTokenRepository, UserRepository

log = logging.getLogger(__name__)

# First SQL keywords a read-only scope refuses to send to the database
WRITE_KEYWORDS: Final[tuple[str, ...]] = (
    "insert",
    "update",
    "delete",
    "replace",
    "create",
    "drop",
    "alter",
)


class ChirpyRepositories:
    """The Chirpy repositories, all sharing ``session``."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=session)
        self.chirps = ChirpRepository(session=session)
        self.refresh_tokens = RefreshTokenRepository(session=session)


class SQLAlchemyUnitOfWork(ChirpyRepositories):
    """
    Read-write scope: commit when the block succeeds, roll back when it raises.

    A failed commit (e.g. a duplicate email caught by the unique index) is
    rolled back before the error propagates.
    """

    def __init__(self) -> None:
        super().__init__(db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except Exception:
            self.rollback()
            raise

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(ChirpyRepositories):
    """
    Lookup scope that refuses writes.

    While open, ORM flushes with pending changes and DML statements on the
    session's connection raise ``RuntimeError``. On exit the guards are
    removed and, if this scope started the transaction, it is rolled back.
    A transaction that was already open (an enclosing request or test
    fixture) is left untouched.
    """

    def __init__(self) -> None:
        super().__init__(db.session)
        self._owns_transaction = False
        self._conn: Connection | None = None

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        self._owns_transaction = not self.session.in_transaction()
        self._conn = self.session.connection()
        event.listen(self.session, "before_flush", self._block_flush)
        event.listen(self._conn, "before_cursor_execute", self._block_writes)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        with suppress(InvalidRequestError):
            event.remove(self.session, "before_flush", self._block_flush)
        if self._conn is not None:
            with suppress(InvalidRequestError):
                event.remove(self._conn, "before_cursor_execute", self._block_writes)
            self._conn = None
        if self._owns_transaction:
            self.session.rollback()
            self._owns_transaction = False

    def commit(self) -> None:
        """
        :raises RuntimeError: always; lookups never commit.
        """
        raise RuntimeError("Read-only unit of work cannot commit")

    def rollback(self) -> None:
        self.session.rollback()

    # ------------------------------- Guards --------------------------------

    @staticmethod
    def _block_flush(session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError("Read-only unit of work: flush blocked")

    @staticmethod
    def _block_writes(conn, cursor, statement, parameters, context, executemany) -> None:
        keyword = statement.lstrip().split(None, 1)[0].lower() if statement.strip() else ""
        if keyword in WRITE_KEYWORDS:
            log.error("write attempted inside read-only unit of work: %s", keyword.upper())
            raise RuntimeError(f"Read-only unit of work: SQL statement blocked ({keyword.upper()})")
