"""User repository for persistence and authentication utilities."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select, update

from chirpy.models.user import User
from chirpy.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    This repository focuses on safe lookup and password operations.
    Tokens and sessions live elsewhere; this class only manages user rows.
    """

    model = User

    # ---------------------------- Whitelists ----------------------------

    def _updatable_fields(self):
        """Publicly allowed updatable fields (``password`` goes through the hashing setter)."""
        return {"email", "password"}

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == email.lower().strip())
        result = self.session.execute(stmt).scalars().first()
        return cast(User | None, result)

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists."""
        stmt = select(User.id).where(User.email == email.lower().strip())
        return bool(self.session.execute(stmt).first())

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password.

        :param email: Email address to authenticate.
        :type email: str
        :param password: Raw password to verify.
        :type password: str
        :returns: Authenticated user or ``None`` when credentials fail.
        :rtype: User | None
        """
        user = self.get_by_email(email)
        if not user or not user.verify_password(password):
            return None
        return user

    # ---------------------------- Tier ----------------------------

    def mark_chirpy_red(self, user_id) -> bool:
        """Set the premium flag in a single ``UPDATE``.

        :returns: ``True`` when a row matched the id.
        """
        stmt = update(User).where(User.id == user_id).values(is_chirpy_red=True)
        result = self.session.execute(stmt, execution_options={"synchronize_session": "fetch"})
        return bool(result.rowcount)
