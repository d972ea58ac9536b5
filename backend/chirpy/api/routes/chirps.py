"""Chirp endpoints."""

from __future__ import annotations

import uuid

from flask import Blueprint, request

from chirpy.api.deps import current_user_id, empty_response, json_body, json_response, require_auth, timing
from chirpy.schemas import ChirpCreateSchema, ChirpQuerySchema, ChirpSchema
from chirpy.services import ChirpCreateIn, ChirpListIn, ChirpService

bp = Blueprint("chirps", __name__, url_prefix="/chirps")

chirp_schema = ChirpSchema()
chirp_list_schema = ChirpSchema(many=True)
chirp_create_schema = ChirpCreateSchema()
chirp_query_schema = ChirpQuerySchema()


@bp.post("")
@require_auth
@timing
def create_chirp():
    """Post a chirp as the authenticated user."""

    data = chirp_create_schema.load(json_body())
    chirp = ChirpService().create_chirp(current_user_id(), ChirpCreateIn(**data))
    return json_response(chirp_schema.dump(chirp), status=201)


@bp.get("")
@timing
def list_chirps():
    """List chirps, optionally filtered by ``authorId`` and ordered by ``sort``."""

    filters = chirp_query_schema.load(request.args)
    chirps = ChirpService().list_chirps(ChirpListIn(**filters))
    return json_response(chirp_list_schema.dump(chirps))


@bp.get("/<uuid:chirp_id>")
@timing
def get_chirp(chirp_id: uuid.UUID):
    chirp = ChirpService().get_chirp(chirp_id)
    return json_response(chirp_schema.dump(chirp))


@bp.delete("/<uuid:chirp_id>")
@require_auth
@timing
def delete_chirp(chirp_id: uuid.UUID):
    """Delete one of the caller's own chirps."""

    ChirpService().delete_chirp(current_user_id(), chirp_id)
    return empty_response()
