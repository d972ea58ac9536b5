"""Centralized JSON error handling for the API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from chirpy.core.logger import ensure_request_id
from chirpy.services._shared.errors import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
)

log = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong on our end"

# Service error type -> HTTP status. Subclasses resolve through the MRO.
_SERVICE_STATUS: dict[type[ServiceError], HTTPStatus] = {
    BadRequestError: HTTPStatus.BAD_REQUEST,
    UnauthorizedError: HTTPStatus.UNAUTHORIZED,
    ForbiddenError: HTTPStatus.FORBIDDEN,
    NotFoundError: HTTPStatus.NOT_FOUND,
}


def error_response(message: str, status: int) -> tuple[Response, int]:
    """
    Build the ``{"error": message}`` body shared by every failure.

    :param message: Human-readable error summary (safe for clients).
    :param status: HTTP status code.
    :returns: Flask JSON response and status code.
    """
    return jsonify({"error": message}), int(status)


def status_for(exc: ServiceError) -> int:
    """Resolve the HTTP status for a service error (400 when unmapped)."""
    for klass in type(exc).__mro__:
        status = _SERVICE_STATUS.get(klass)  # type: ignore[arg-type]
        if status is not None:
            return int(status)
    return int(HTTPStatus.BAD_REQUEST)


def _first_validation_message(messages: Any) -> str:
    """Flatten marshmallow's nested messages into a single readable string."""
    if isinstance(messages, dict):
        for field, value in messages.items():
            inner = _first_validation_message(value)
            return f"{field}: {inner}" if field != "_schema" else inner
    if isinstance(messages, list | tuple) and messages:
        return _first_validation_message(messages[0])
    return str(messages) if messages else "Invalid request body"


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Every handled error yields ``{"error": "<message>"}``.
    - Emits 5xx with ``exc_info`` for traceability; 4xx as warnings.
    """

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        status = status_for(err)
        log.warning(
            "ServiceError: type=%s status=%s msg=%s request_id=%s",
            type(err).__name__,
            status,
            err.message,
            ensure_request_id(),
        )
        return error_response(err.message, status)

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        message = _first_validation_message(err.messages)
        log.warning("ValidationError: msg=%s request_id=%s", message, ensure_request_id())
        return error_response(message, HTTPStatus.BAD_REQUEST)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = (err.description or HTTPStatus(status).phrase).strip()
        if status == HTTPStatus.NOT_FOUND:
            message = HTTPStatus.NOT_FOUND.phrase
        level = log.error if status >= 500 else log.warning
        # Avoid leaking tracebacks for expected HTTP errors (no exc_info)
        level(
            "HTTPException: status=%s detail=%s request_id=%s",
            status,
            message,
            ensure_request_id(),
        )
        return error_response(message, status)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Unexpected server-side error; never leak internal details
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            exc_info=err,
        )
        return error_response(INTERNAL_ERROR_MESSAGE, HTTPStatus.INTERNAL_SERVER_ERROR)
