"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Platform marker that unlocks destructive admin operations
DEV_PLATFORM: Final[str] = "dev"


# Load .env in development (no-op when missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    ADMIN_PREFIX: str
        Root path for the admin blueprint (metrics and reset).
    FILESERVER_PREFIX: str
        Root path for the static web app whose hits are counted.
    SECRET_KEY: str
        Flask secret used for session signing.
    JWT_SECRET: str
        Symmetric key used to sign and verify access tokens.
    POLKA_KEY: str
        Static API key expected on payment webhook calls.
    PLATFORM: str
        Deployment marker; destructive admin operations require ``"dev"``.
    ACCESS_TOKEN_TTL_SECONDS: int
        Ceiling for access token lifetimes (one hour by default).
    REFRESH_TOKEN_TTL_DAYS: int
        Lifetime of refresh tokens issued at login (60 days by default).
    ALLOW_CALLER_REQUESTED_LIFETIME: bool
        Whether ``POST /login`` honours ``expiresInSeconds`` (clamped to the
        ceiling) or always issues a full-lifetime token.
    REFRESH_TOKEN_BACKEND: str
        ``"sqlalchemy"`` (default) or ``"redis"``.
    REDIS_URL: str | None
        Connection URL for the Redis refresh-token backend.
    SQLALCHEMY_DATABASE_URI: str
        Database connection string consumed by SQLAlchemy.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"
    ADMIN_PREFIX = "/admin"
    FILESERVER_PREFIX = "/app"

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET = os.getenv("JWT_SECRET", "CHANGE_ME_JWT_SECRET_AT_LEAST_32_BYTES")
    POLKA_KEY = os.getenv("POLKA_KEY", "CHANGE_ME_POLKA")
    PLATFORM = os.getenv("PLATFORM", "production")

    # Sessions
    ACCESS_TOKEN_TTL_SECONDS = env_int("ACCESS_TOKEN_TTL_SECONDS", 3600)
    REFRESH_TOKEN_TTL_DAYS = env_int("REFRESH_TOKEN_TTL_DAYS", 60)
    ALLOW_CALLER_REQUESTED_LIFETIME = env_bool("ALLOW_CALLER_REQUESTED_LIFETIME", True)
    REFRESH_TOKEN_BACKEND = os.getenv("REFRESH_TOKEN_BACKEND", "sqlalchemy")
    REDIS_URL = os.getenv("REDIS_URL")

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default. ``PLATFORM`` still has to be set to
    ``dev`` explicitly before ``/admin/reset`` will wipe anything.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Runs as the ``dev`` platform so reset flows are testable.
    """

    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    PLATFORM = DEV_PLATFORM
    JWT_SECRET = "testing-secret-key-with-enough-bytes!"
    POLKA_KEY = "testing-polka-key"
    REFRESH_TOKEN_BACKEND = "sqlalchemy"
    REDIS_URL = None
    USE_PROXYFIX = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug and SQL echoing disabled while relying on WSGI-level log
    configuration for noise control.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


# Settings that must be supplied by the environment outside tests
REQUIRED_SECRETS: Final[tuple[str, ...]] = ("JWT_SECRET", "POLKA_KEY")
PLACEHOLDER_PREFIX: Final[str] = "CHANGE_ME"


def missing_secrets(config: Mapping[str, Any]) -> list[str]:
    """Return the required secrets that are unset or still a placeholder."""
    missing = []
    for name in REQUIRED_SECRETS:
        value = str(config.get(name) or "").strip()
        if not value or value.startswith(PLACEHOLDER_PREFIX):
            missing.append(name)
    return missing


def ensure_secrets(config: Mapping[str, Any]) -> None:
    """Refuse to start with forgeable token or webhook secrets.

    Parameters
    ----------
    config: Mapping[str, Any]
        Loaded Flask configuration.

    Raises
    ------
    RuntimeError
        Outside ``TESTING`` when any of :data:`REQUIRED_SECRETS` is unset or
        keeps its ``CHANGE_ME`` default.
    """
    if config.get("TESTING"):
        return
    missing = missing_secrets(config)
    if missing:
        raise RuntimeError(f"Required settings are not configured: {', '.join(missing)}")
