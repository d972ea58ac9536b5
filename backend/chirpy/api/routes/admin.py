"""Administrative endpoints: hit metrics and development reset."""

from __future__ import annotations

from flask import Blueprint

from chirpy.api.deps import admin_service, text_response, timing

bp = Blueprint("admin", __name__)

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


@bp.get("/metrics")
@timing
def metrics():
    """Render the static file-server hit count."""

    hits = admin_service().metrics()
    return text_response(METRICS_TEMPLATE.format(hits=hits), mimetype="text/html")


@bp.post("/reset")
@timing
def reset():
    """Wipe users, chirps and refresh tokens and zero the hit counter (dev only)."""

    admin_service().reset()
    return text_response("OK")
