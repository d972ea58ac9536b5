"""User account endpoints."""

from __future__ import annotations

from flask import Blueprint

from chirpy.api.deps import auth_service, current_user_id, json_body, json_response, require_auth, timing
from chirpy.schemas import UserCredentialsSchema, UserSchema
from chirpy.services import CredentialsUpdateIn, IdentityService, UserRegisterIn

bp = Blueprint("users", __name__)

credentials_schema = UserCredentialsSchema()
user_schema = UserSchema()


@bp.post("/users")
@timing
def create_user():
    """Register a new account."""

    data = credentials_schema.load(json_body())
    user = IdentityService().register_user(UserRegisterIn(**data))
    return json_response(user_schema.dump(user), status=201)


@bp.put("/users")
@require_auth
@timing
def update_user():
    """Replace the caller's email and password."""

    data = credentials_schema.load(json_body())
    user = auth_service().update_credentials(current_user_id(), CredentialsUpdateIn(**data))
    return json_response(user_schema.dump(user))
