"""Readiness endpoint."""

from __future__ import annotations

from flask import Blueprint

from chirpy.api.deps import text_response, timing

bp = Blueprint("health", __name__)


@bp.get("/healthz")
@timing
def healthz():
    """Report that the process is up."""

    return text_response("OK")
