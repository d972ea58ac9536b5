# chirpy/services/auth/service.py
from __future__ import annotations

import logging
import uuid

from sqlalchemy.exc import IntegrityError

from chirpy.repositories.user import UserRepository
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.dto import UserOut
from chirpy.services._shared.errors import (
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
    violates,
)
from chirpy.services._shared.ports import AccessTokenCodec, RefreshTokenStore
from chirpy.services.auth.dto import (
    AccessTokenOut,
    AuthTokenConfig,
    CredentialsUpdateIn,
    LoginIn,
    RefreshIn,
    RevokeIn,
    SessionOut,
)

log = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Incorrect email or password"
INVALID_REFRESH_MESSAGE = "Invalid or expired refresh token"
DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


def is_duplicate_email(exc: IntegrityError) -> bool:
    """Match the users.email unique constraint across PostgreSQL and SQLite wording."""
    return violates(exc, "uq_users_email") or violates(exc, "users.email")


class AuthService(BaseService):
    """
    Credential and session lifecycle (login / refresh / revoke / update).

    Access tokens are stateless and minted through an :class:`AccessTokenCodec`;
    refresh tokens are opaque and tracked by a :class:`RefreshTokenStore`.
    Refresh tokens are not rotated: one stays usable until it expires or is
    revoked.
    """

    def __init__(
        self,
        *,
        codec: AccessTokenCodec,
        refresh_store: RefreshTokenStore,
        token_cfg: AuthTokenConfig | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param codec: Adapter for issuing/verifying access tokens.
        :param refresh_store: Stateful store for refresh tokens.
        :param token_cfg: Lifetime configuration.
        """
        super().__init__()
        self.codec = codec
        self.refresh_store = refresh_store
        self.cfg = token_cfg or AuthTokenConfig()

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def access_lifetime_for(self, requested: int | None) -> int:
        """Return the access lifetime for a login, never above the ceiling."""
        ceiling = self.cfg.access_ttl_seconds
        if not self.cfg.allow_caller_requested_lifetime or requested is None or requested <= 0:
            return ceiling
        return min(int(requested), ceiling)

    def login(self, dto: LoginIn) -> SessionOut:
        """
        Authenticate credentials and open a session.

        Unknown email and wrong password fail identically.

        :param dto: Login input.
        :returns: User snapshot with access and refresh tokens.
        :raises UnauthorizedError: If credentials are missing or invalid.
        """
        if not isinstance(dto.email, str) or not isinstance(dto.password, str):
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
        if not dto.email or not dto.password:
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.authenticate(dto.email, dto.password)
            if user is None:
                log.info("login failed")
                raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
            user_out = UserOut.from_model(user)

        # Persist the refresh token before handing anything to the client
        refresh_token = self.refresh_store.new_token()
        self.refresh_store.issue(
            token=refresh_token,
            user_id=user_out.id,
            expires_at=self.now_utc() + self.cfg.refresh_expires,
        )

        access_token = self.codec.issue(
            str(user_out.id), self.access_lifetime_for(dto.expires_in_seconds)
        )
        log.info("login succeeded", extra={"user_id": str(user_out.id)})
        return SessionOut(user=user_out, access_token=access_token, refresh_token=refresh_token)

    # ------------------------------------------------------------------ #
    # Refresh (no rotation)
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> AccessTokenOut:
        """
        Mint a new full-lifetime access token from a usable refresh token.

        :raises UnauthorizedError: If the token is unknown, revoked or expired.
        """
        user = self.refresh_store.resolve_user(dto.refresh_token, now=self.now_utc())
        if user is None:
            log.info("refresh rejected")
            raise UnauthorizedError(INVALID_REFRESH_MESSAGE)
        access_token = self.codec.issue(str(user.id), self.cfg.access_ttl_seconds)
        return AccessTokenOut(access_token=access_token)

    # ------------------------------------------------------------------ #
    # Revoke
    # ------------------------------------------------------------------ #

    def revoke(self, dto: RevokeIn) -> None:
        """Revoke a refresh token. Unknown or already-revoked tokens are a no-op."""
        changed = self.refresh_store.revoke(dto.refresh_token, now=self.now_utc())
        log.info("refresh token revoke", extra={"status": "revoked" if changed else "noop"})

    # ------------------------------------------------------------------ #
    # Identity from access token
    # ------------------------------------------------------------------ #

    def authenticate_access_token(self, token: str) -> uuid.UUID:
        """
        Verify an access token and return the user id it asserts.

        :raises UnauthorizedError: On any verification failure.
        """
        subject = self.codec.verify(token)
        try:
            return uuid.UUID(subject)
        except ValueError as exc:
            raise UnauthorizedError("Invalid token") from exc

    # ------------------------------------------------------------------ #
    # Credentials
    # ------------------------------------------------------------------ #

    def update_credentials(self, user_id: uuid.UUID, dto: CredentialsUpdateIn) -> UserOut:
        """
        Replace the email and password of ``user_id``.

        Existing refresh tokens stay valid.

        :raises NotFoundError: If the user no longer exists.
        :raises BadRequestError: If the email belongs to another account.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_for_update(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            other = repo.get_by_email(dto.email)
            if other is not None and other.id != user.id:
                raise BadRequestError(DUPLICATE_EMAIL_MESSAGE)

            try:
                repo.update(user, email=dto.email, password=dto.password)
            except IntegrityError as exc:
                if is_duplicate_email(exc):
                    raise BadRequestError(DUPLICATE_EMAIL_MESSAGE) from exc
                raise
            except ValueError as exc:
                raise BadRequestError(str(exc)) from exc

            return UserOut.from_model(user)
