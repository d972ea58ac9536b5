"""API blueprint package aggregating the route groups."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, such as ``"/api"`` or ``"/admin"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.

    Notes
    -----
    Empty relative prefixes mount a blueprint directly at the group root.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.rstrip("/"), rel_prefix.strip("/")] if segment
        )
        full_prefix = "/" + full_prefix if not full_prefix.startswith("/") else full_prefix
        app.register_blueprint(bp, url_prefix=full_prefix)


def init_app(app: Flask) -> None:
    """Mount the API, admin and file-server groups on the Flask app."""

    from chirpy.api.routes import ADMIN_REGISTRY, API_REGISTRY, FILESERVER_REGISTRY

    register_blueprint_group(
        app, base_prefix=app.config.get("API_BASE_PREFIX", "/api"), entries=API_REGISTRY
    )
    register_blueprint_group(
        app, base_prefix=app.config.get("ADMIN_PREFIX", "/admin"), entries=ADMIN_REGISTRY
    )
    register_blueprint_group(
        app,
        base_prefix=app.config.get("FILESERVER_PREFIX", "/app"),
        entries=FILESERVER_REGISTRY,
    )


__all__ = ["init_app", "register_blueprint_group"]
