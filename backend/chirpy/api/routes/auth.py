"""Session endpoints: login, refresh and revoke."""

from __future__ import annotations

from dataclasses import asdict

from flask import Blueprint

from chirpy.api.deps import auth_service, bearer_token, empty_response, json_body, json_response, timing
from chirpy.schemas import AccessTokenSchema, LoginSchema, SessionSchema
from chirpy.services import LoginIn, RefreshIn, RevokeIn

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
session_schema = SessionSchema()
access_token_schema = AccessTokenSchema()


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and open a session."""

    payload = json_body()
    # A body that is not an object carries no credentials
    data = login_schema.load(payload if isinstance(payload, dict) else {})
    session = auth_service().login(LoginIn(**data))
    body = {
        **asdict(session.user),
        "token": session.access_token,
        "refresh_token": session.refresh_token,
    }
    return json_response(session_schema.dump(body))


@bp.post("/refresh")
@timing
def refresh():
    """Exchange the Bearer refresh token for a new access token."""

    result = auth_service().refresh(RefreshIn(refresh_token=bearer_token()))
    return json_response(access_token_schema.dump({"token": result.access_token}))


@bp.post("/revoke")
@timing
def revoke():
    """Revoke the Bearer refresh token. Unknown tokens are accepted silently."""

    auth_service().revoke(RevokeIn(refresh_token=bearer_token()))
    return empty_response()
