"""Static web app served under the file-server prefix.

Every request routed here counts as one hit on the admin metrics page,
including requests for files that do not exist.
"""

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, send_from_directory

from chirpy.infra.wiring import hit_counter

STATIC_ROOT = Path(__file__).resolve().parents[2] / "static" / "app"

bp = Blueprint("fileserver", __name__)


@bp.before_request
def count_hit() -> None:
    hit_counter().increment()


@bp.get("/")
def index():
    return send_from_directory(STATIC_ROOT, "index.html")


@bp.get("/<path:filename>")
def asset(filename: str):
    return send_from_directory(STATIC_ROOT, filename)
