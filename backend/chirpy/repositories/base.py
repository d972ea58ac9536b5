"""Generic repository base for SQLAlchemy 2.x.

Repositories own queries only. They flush but never commit or roll back;
the Unit of Work that hands them a session decides the transaction outcome.

Design decisions
----------------
* Ordering is opt-in per aggregate via ``_sortable_fields`` and always ends
  with a primary-key tiebreaker, so rows created in the same microsecond
  still list in a stable order.
* Updates go through an explicit ``_updatable_fields`` whitelist; assigning
  via ``setattr`` keeps model validators and property setters in play.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, delete, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from chirpy.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


def parse_sort_tokens(raw: Iterable[str]) -> list[tuple[str, bool]]:
    """Parse ``["-created_at", "email"]`` style tokens into ``(field, is_desc)``.

    :param raw: Public sort tokens; a leading ``-`` means descending.
    :type raw: Iterable[str]
    :rtype: list[tuple[str, bool]]
    """
    parsed: list[tuple[str, bool]] = []
    for token in raw:
        is_desc = token.startswith("-")
        field = (token[1:] if is_desc else token).strip()
        if field:
            parsed.append((field, is_desc))
    return parsed


class BaseRepository(Generic[E]):
    """Persistence-only repository for a single aggregate.

    Subclasses set ``model`` and may override ``_pk_attr``,
    ``_sortable_fields``, ``_filterable_fields`` and ``_updatable_fields``.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """
        :param session: Session shared across the Unit of Work scope. Falls
            back to the Flask-scoped ``db.session`` when omitted.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        return getattr(self.model, "id")

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {}

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {}

    def _updatable_fields(self) -> set[str]:
        return set()

    # ------------------------------ Query building ---------------------------

    def _filtered(self, stmt: Select[Any], filters: Mapping[str, Any] | None) -> Select[Any]:
        """Apply equality filters; keys outside ``_filterable_fields`` are ignored."""
        allowed = self._filterable_fields()
        for key, value in (filters or {}).items():
            col = allowed.get(key)
            if col is not None:
                stmt = stmt.where(col == value)
        return stmt

    def _sorted(self, stmt: Select[Any], tokens: Iterable[str]) -> Select[Any]:
        """Apply whitelisted ``ORDER BY`` clauses plus the PK tiebreaker."""
        allowed = self._sortable_fields()
        for field, is_desc in parse_sort_tokens(tokens):
            col = allowed.get(field)
            if col is not None:
                stmt = stmt.order_by(col.desc() if is_desc else col.asc())
        return stmt.order_by(self._pk_attr().asc())

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage ``instance`` and flush so defaults (ids, timestamps) are set."""
        self.session.add(instance)
        self.flush()
        return instance

    def get(self, entity_id: Any) -> E | None:
        stmt = select(self.model).where(self._pk_attr() == entity_id)
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def get_for_update(self, entity_id: Any) -> E | None:
        """Like :meth:`get` with ``FOR UPDATE`` (ignored by SQLite)."""
        stmt = select(self.model).where(self._pk_attr() == entity_id).with_for_update()
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def delete(self, instance: E) -> None:
        self.session.delete(instance)
        self.flush()

    def delete_all(self) -> int:
        """Bulk-delete every row of the aggregate.

        :returns: Number of rows removed.
        :rtype: int
        """
        result = self.session.execute(delete(self.model))
        return int(result.rowcount or 0)

    def flush(self) -> None:
        self.session.flush()

    # ----------------------------- Safe updates -------------------------------

    def update(self, instance: E, **fields: Any) -> E:
        """Assign whitelisted fields to ``instance`` and flush.

        :raises ValueError: If a key is not in ``_updatable_fields``.
        """
        allowed = self._updatable_fields()
        unknown = sorted(k for k in fields if k not in allowed)
        if unknown:
            raise ValueError(f"Unknown or non-updatable fields: {unknown}")
        for key, value in fields.items():
            setattr(instance, key, value)
        self.flush()
        return instance

    # ------------------------------- Listing ---------------------------------

    def list(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        sort: Iterable[str] | None = None,
    ) -> list[E]:
        """List entities matching ``filters`` ordered by ``sort`` tokens."""
        stmt = self._sorted(self._filtered(select(self.model), filters), sort or [])
        return list(self.session.execute(stmt).scalars().all())
