"""Payment webhook schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class PolkaWebhookSchema(Schema):
    """Envelope of a Polka delivery.

    Fields are loaded raw: an ignored event is acknowledged whatever its
    envelope looks like, and ``data`` is only checked for ``user.upgraded``.
    """

    class Meta:
        unknown = EXCLUDE

    event = fields.Raw(load_default=None)
    data = fields.Raw(load_default=None)
