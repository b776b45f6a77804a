"""REST endpoints for single and batch translation."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, request

from lingorelay.backend.app.extensions import get_state
from lingorelay.backend.app.http import problem_response
from lingorelay.backend.app.services.batch import dispatch
from lingorelay.backend.app.services.provider import ProviderError
from lingorelay.backend.services import (
    build_batch_response,
    build_json_response,
    parse_batch_params,
    parse_translate_params,
)

blueprint = Blueprint("translate", __name__)

logger = logging.getLogger(__name__)


@blueprint.route("/translate", methods=["GET", "POST"])
async def translate_text() -> tuple[Any, int]:
    """Translate one text and return the provider payload verbatim."""

    state = get_state()
    params = parse_translate_params(request, state.settings.defaults)

    async with state.provider.session() as session:
        result = await session.translate(params.text, params.source, params.target)

    return build_json_response(result.raw)


@blueprint.post("/translate/batch")
async def translate_batch() -> tuple[Any, int]:
    """Translate every text concurrently and report per-text outcomes."""

    state = get_state()
    params = parse_batch_params(request, state.settings.defaults)
    logger.debug(
        "Batch request: %d texts, %s -> %s", len(params.texts), params.source, params.target
    )

    async with state.provider.session() as session:
        result = await dispatch(params.texts, params.source, params.target, session)

    return build_batch_response(result)


@blueprint.errorhandler(ProviderError)
def handle_provider_error(error: ProviderError):
    logger.error("Translation error: %s", error.message)
    return problem_response(
        "Translation service failed", status=500, details=error.message
    ).to_response()
