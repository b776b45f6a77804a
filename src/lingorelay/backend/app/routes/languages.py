"""Expose the static table of supported languages."""

from __future__ import annotations

from flask import Blueprint

from lingorelay.backend.app.extensions import get_state
from lingorelay.backend.services import build_json_response

blueprint = Blueprint("languages", __name__)


@blueprint.route("/languages", methods=["GET", "POST"])
def list_languages():
    """Return language codes mapped to their display names."""

    return build_json_response(get_state().languages.languages)
