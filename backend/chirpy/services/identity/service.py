"""
IdentityService
===============

Aggregate service responsible for the `User` aggregate:
- Registration with email uniqueness
- Lookup by id
- Premium tier upgrades
"""

from __future__ import annotations

import uuid

from sqlalchemy.exc import IntegrityError

from chirpy.repositories.user import UserRepository
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.dto import UserOut
from chirpy.services._shared.errors import BadRequestError, NotFoundError
from chirpy.services.auth.service import DUPLICATE_EMAIL_MESSAGE, is_duplicate_email
from chirpy.services.identity.dto import UserRegisterIn


class IdentityService(BaseService):
    """Application service for the `User` aggregate."""

    # --------------------------------------------------------------------- #
    # Registration
    # --------------------------------------------------------------------- #

    def register_user(self, dto: UserRegisterIn) -> UserOut:
        """
        Register a new user.

        :param dto: User registration input DTO.
        :type dto: UserRegisterIn
        :returns: Public-safe user DTO.
        :rtype: UserOut
        :raises BadRequestError: When the email is taken or invalid.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users

            if repo.exists_by_email(dto.email):
                raise BadRequestError(DUPLICATE_EMAIL_MESSAGE)

            try:
                user = repo.model(email=dto.email, password=dto.password)
                repo.add(user)
            except IntegrityError as exc:
                if is_duplicate_email(exc):
                    raise BadRequestError(DUPLICATE_EMAIL_MESSAGE) from exc
                raise
            except ValueError as exc:
                # Model validators (email shape, empty password)
                raise BadRequestError(str(exc)) from exc

            return UserOut.from_model(user)

    # --------------------------------------------------------------------- #
    # Retrieval
    # --------------------------------------------------------------------- #

    def get_user(self, user_id: uuid.UUID) -> UserOut:
        """
        Retrieve a user by identifier.

        :raises NotFoundError: If user does not exist.
        """
        with self.ro_uow() as uow:
            user = uow.users.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            return UserOut.from_model(user)

    def find_user(self, user_id: uuid.UUID) -> UserOut | None:
        """Like :meth:`get_user` but returns ``None`` for unknown ids."""
        with self.ro_uow() as uow:
            user = uow.users.get(user_id)
            return UserOut.from_model(user) if user is not None else None

    # --------------------------------------------------------------------- #
    # Tier
    # --------------------------------------------------------------------- #

    def upgrade_to_chirpy_red(self, user_id: uuid.UUID) -> None:
        """
        Flag the user as Chirpy Red. Upgrading twice is harmless.

        :raises NotFoundError: If user does not exist.
        """
        with self.rw_uow() as uow:
            if not uow.users.mark_chirpy_red(user_id):
                raise NotFoundError("User", user_id)
