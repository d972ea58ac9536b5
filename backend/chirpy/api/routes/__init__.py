"""Route blueprints grouped by mount point."""

from __future__ import annotations

from flask import Blueprint

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .admin import bp as admin_bp  # noqa: E402
from .auth import bp as auth_bp  # noqa: E402
from .chirps import bp as chirps_bp  # noqa: E402
from .fileserver import bp as fileserver_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .users import bp as users_bp  # noqa: E402
from .webhooks import bp as webhooks_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_group)
API_REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/healthz
    (users_bp, ""),  # -> /api/users
    (auth_bp, ""),  # -> /api/login, /api/refresh, /api/revoke
    (chirps_bp, "/chirps"),
    (webhooks_bp, ""),  # -> /api/polka/webhooks
]

ADMIN_REGISTRY: list[tuple[Blueprint, str]] = [(admin_bp, "")]

FILESERVER_REGISTRY: list[tuple[Blueprint, str]] = [(fileserver_bp, "")]
