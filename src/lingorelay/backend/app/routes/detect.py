"""REST endpoint for language detection."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, request

from lingorelay.backend.app.extensions import get_state
from lingorelay.backend.app.http import problem_response
from lingorelay.backend.app.services.provider import ProviderError
from lingorelay.backend.services import build_json_response, parse_detect_text

blueprint = Blueprint("detect", __name__)

logger = logging.getLogger(__name__)


@blueprint.route("/detect", methods=["GET", "POST"])
async def detect_language() -> tuple[Any, int]:
    """Detect the language of ``text`` using the provider."""

    text = parse_detect_text(request)

    async with get_state().provider.session() as session:
        result = await session.detect(text)

    return build_json_response(result.raw)


@blueprint.errorhandler(ProviderError)
def handle_provider_error(error: ProviderError):
    logger.error("Language detection error: %s", error.message)
    return problem_response(
        "Language detection service failed", status=500, details=error.message
    ).to_response()
