"""Chirp resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class ChirpCreateSchema(Schema):
    """Payload for posting a chirp. Length is enforced by the service."""

    class Meta:
        unknown = EXCLUDE

    body = fields.String(required=True)


class ChirpQuerySchema(Schema):
    """Supported query parameters for listing chirps."""

    class Meta:
        unknown = EXCLUDE

    author_id = fields.UUID(load_default=None, data_key="authorId")
    sort = fields.String(load_default="asc", validate=validate.OneOf(["asc", "desc"]))


class ChirpSchema(Schema):
    """Public representation of a chirp."""

    id = fields.UUID(required=True)
    created_at = fields.DateTime(required=True, data_key="createdAt")
    updated_at = fields.DateTime(required=True, data_key="updatedAt")
    body = fields.String(required=True)
    user_id = fields.UUID(required=True, data_key="userId")
