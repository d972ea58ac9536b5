"""Payment provider webhooks."""

from __future__ import annotations

from flask import Blueprint

from chirpy.api.deps import empty_response, json_body, require_polka_key, timing
from chirpy.schemas import PolkaWebhookSchema
from chirpy.services import WebhookService

bp = Blueprint("webhooks", __name__)

polka_schema = PolkaWebhookSchema()


@bp.post("/polka/webhooks")
@require_polka_key
@timing
def polka_webhook():
    """Apply a Polka event. Ignored events are still acknowledged with 204."""

    payload = json_body()
    data = polka_schema.load(payload if isinstance(payload, dict) else {})
    WebhookService().handle_polka_event(data["event"], data["data"])
    return empty_response()
