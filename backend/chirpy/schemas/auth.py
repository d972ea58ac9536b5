"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from .user import UserSchema


class LoginSchema(Schema):
    """Input payload for authenticating a user.

    Credentials are loaded raw and optional so that a missing or non-string
    email or password fails with the same 401 as a wrong one.
    """

    class Meta:
        unknown = EXCLUDE

    email = fields.Raw(load_default=None)
    password = fields.Raw(load_default=None)
    expires_in_seconds = fields.Integer(
        load_default=None,
        strict=True,
        validate=validate.Range(min=1),
        data_key="expiresInSeconds",
        error_messages={"invalid": "Invalid expiresInSeconds"},
    )


class SessionSchema(UserSchema):
    """Login response: the user plus both session tokens."""

    token = fields.String(required=True)
    refresh_token = fields.String(required=True, data_key="refreshToken")


class AccessTokenSchema(Schema):
    """Response payload containing a fresh access token."""

    token = fields.String(required=True)
