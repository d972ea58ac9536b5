"""Bind infrastructure adapters to the application.

Adapters are created once per app and stored on ``app.extensions`` so
request handlers can assemble services without touching configuration.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, current_app

from chirpy.core.extensions import get_redis
from chirpy.infra.jwt.access_token_codec import JWTAccessTokenCodec
from chirpy.infra.redis.redis_refresh_token_store import RedisRefreshTokenStore
from chirpy.infra.sqlalchemy.refresh_token_store import SQLAlchemyRefreshTokenStore
from chirpy.services._shared.ports import AccessTokenCodec, RefreshTokenStore
from chirpy.services.admin.hit_counter import HitCounter
from chirpy.services.auth.dto import AuthTokenConfig
from chirpy.services.identity.service import IdentityService

log = logging.getLogger(__name__)

ACCESS_TOKEN_CODEC = "access_token_codec"
REFRESH_TOKEN_STORE = "refresh_token_store"
AUTH_TOKEN_CONFIG = "auth_token_config"
HIT_COUNTER = "hit_counter"


def build_refresh_token_store(app: Flask) -> RefreshTokenStore:
    """Select the refresh token backend named by ``REFRESH_TOKEN_BACKEND``.

    :raises RuntimeError: For an unknown backend name.
    """
    backend = str(app.config.get("REFRESH_TOKEN_BACKEND", "sqlalchemy")).strip().lower()
    if backend == "sqlalchemy":
        return SQLAlchemyRefreshTokenStore()
    if backend == "redis":
        return RedisRefreshTokenStore(get_redis(), IdentityService().find_user)
    raise RuntimeError(f"Unknown REFRESH_TOKEN_BACKEND {backend!r}")


def build_token_config(app: Flask) -> AuthTokenConfig:
    return AuthTokenConfig(
        access_ttl_seconds=int(app.config["ACCESS_TOKEN_TTL_SECONDS"]),
        refresh_expires=timedelta(days=int(app.config["REFRESH_TOKEN_TTL_DAYS"])),
        allow_caller_requested_lifetime=bool(app.config["ALLOW_CALLER_REQUESTED_LIFETIME"]),
    )


def init_app(app: Flask) -> None:
    """Create the codec, refresh store, token config and hit counter."""
    app.extensions[ACCESS_TOKEN_CODEC] = JWTAccessTokenCodec(app.config["JWT_SECRET"])
    app.extensions[REFRESH_TOKEN_STORE] = build_refresh_token_store(app)
    app.extensions[AUTH_TOKEN_CONFIG] = build_token_config(app)
    app.extensions[HIT_COUNTER] = HitCounter()
    log.info(
        "infrastructure ready",
        extra={"status": type(app.extensions[REFRESH_TOKEN_STORE]).__name__},
    )


def access_token_codec() -> AccessTokenCodec:
    return current_app.extensions[ACCESS_TOKEN_CODEC]


def refresh_token_store() -> RefreshTokenStore:
    return current_app.extensions[REFRESH_TOKEN_STORE]


def auth_token_config() -> AuthTokenConfig:
    return current_app.extensions[AUTH_TOKEN_CONFIG]


def hit_counter() -> HitCounter:
    return current_app.extensions[HIT_COUNTER]
