"""User resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class UserCredentialsSchema(Schema):
    """Payload for registering a user or replacing their credentials."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class UserSchema(Schema):
    """Public representation of a user entity."""

    id = fields.UUID(required=True)
    created_at = fields.DateTime(required=True, data_key="createdAt")
    updated_at = fields.DateTime(required=True, data_key="updatedAt")
    email = fields.Email(required=True)
    is_chirpy_red = fields.Boolean(required=True, data_key="isChirpyRed")
