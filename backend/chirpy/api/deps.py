"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from chirpy.infra.wiring import (
    access_token_codec,
    auth_token_config,
    hit_counter,
    refresh_token_store,
)
from chirpy.services import AdminService, AuthService
from chirpy.services._shared.credentials import get_api_key, get_bearer_token
from chirpy.services._shared.errors import UnauthorizedError
from chirpy.services._shared.policies import ensure_api_key

F = TypeVar("F", bound=Callable[..., Any])


def auth_service() -> AuthService:
    """Assemble an :class:`AuthService` from the app-level adapters."""
    return AuthService(
        codec=access_token_codec(),
        refresh_store=refresh_token_store(),
        token_cfg=auth_token_config(),
    )


def admin_service() -> AdminService:
    return AdminService(
        counter=hit_counter(),
        refresh_store=refresh_token_store(),
        platform=str(current_app.config.get("PLATFORM", "")),
    )


def bearer_token() -> str:
    """Return the Bearer credential of the current request (401 otherwise)."""
    return get_bearer_token(request.headers.get("Authorization"))


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token.

    The authenticated user id is stored on ``g.current_user_id``.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.current_user_id = auth_service().authenticate_access_token(bearer_token())
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_user_id() -> uuid.UUID:
    """Return the user id set by :func:`require_auth`."""
    user_id = g.get("current_user_id")
    if user_id is None:
        raise UnauthorizedError()
    return user_id


def require_polka_key(func: F) -> F:
    """Ensure the request carries ``Authorization: ApiKey <POLKA_KEY>``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        provided = get_api_key(request.headers.get("Authorization"))
        ensure_api_key(provided, str(current_app.config.get("POLKA_KEY", "")))
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_body() -> Any:
    """Return the decoded JSON body, or an empty mapping when absent."""
    payload = request.get_json(silent=True)
    return {} if payload is None else payload


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def text_response(body: str, *, status: int = 200, mimetype: str = "text/plain") -> Response:
    """Return a text response; werkzeug appends ``charset=utf-8`` for ``text/*``."""
    return Response(body, status=status, mimetype=mimetype)


def empty_response(status: int = 204) -> Response:
    return Response(status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
