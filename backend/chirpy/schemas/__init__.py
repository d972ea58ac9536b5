"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import AccessTokenSchema, LoginSchema, SessionSchema
from .chirp import ChirpCreateSchema, ChirpQuerySchema, ChirpSchema
from .user import UserCredentialsSchema, UserSchema
from .webhook import PolkaWebhookSchema

__all__ = [
    "AccessTokenSchema",
    "LoginSchema",
    "SessionSchema",
    "ChirpCreateSchema",
    "ChirpQuerySchema",
    "ChirpSchema",
    "UserCredentialsSchema",
    "UserSchema",
    "PolkaWebhookSchema",
]
