"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`chirpy.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``chirpy.services._shared.base``)
    * :class:`BaseService`

- Shared DTOs (from ``chirpy.services._shared.dto``)
    * :class:`UserOut`

- Session lifecycle (from ``chirpy.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`LoginIn`, :class:`RefreshIn`, :class:`RevokeIn`,
      :class:`CredentialsUpdateIn`, :class:`SessionOut`, :class:`AccessTokenOut`,
      :class:`AuthTokenConfig`

- Accounts, chirps, webhooks and admin
    * :class:`IdentityService`, :class:`ChirpService`, :class:`WebhookService`,
      :class:`AdminService`, :class:`HitCounter`
"""

from __future__ import annotations

from ._shared.base import BaseService
from ._shared.dto import UserOut
from .admin.hit_counter import HitCounter
from .admin.service import AdminService, ResetOut
from .auth.dto import (
    AccessTokenOut,
    AuthTokenConfig,
    CredentialsUpdateIn,
    LoginIn,
    RefreshIn,
    RevokeIn,
    SessionOut,
)
from .auth.service import AuthService
from .chirps.dto import ChirpCreateIn, ChirpListIn, ChirpOut
from .chirps.service import ChirpService
from .identity.dto import UserRegisterIn
from .identity.service import IdentityService
from .webhooks.service import WebhookService

__all__ = [
    # Base
    "BaseService",
    "UserOut",
    # Auth
    "AuthService",
    "AuthTokenConfig",
    "LoginIn",
    "RefreshIn",
    "RevokeIn",
    "CredentialsUpdateIn",
    "SessionOut",
    "AccessTokenOut",
    # Identity
    "IdentityService",
    "UserRegisterIn",
    # Chirps
    "ChirpService",
    "ChirpCreateIn",
    "ChirpListIn",
    "ChirpOut",
    # Webhooks / admin
    "WebhookService",
    "AdminService",
    "ResetOut",
    "HitCounter",
]
