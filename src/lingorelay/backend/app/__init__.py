"""Application factory for the LingoRelay translation front-end."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, InternalServerError

from lingorelay.backend.config.settings import (
    ServiceSettings,
    load_language_table,
    load_settings,
)
from lingorelay.backend.version import get_project_version

from .extensions import RelayState, get_state, init_state
from .http import problem_response
from .models import RequestValidationError
from .services.provider import MicrosoftTranslatorProvider, TranslationProvider

logger = logging.getLogger(__name__)

SERVICE_INDEX = {
    "message": "LingoRelay translation service",
    "endpoints": {
        "/translate": "GET/POST - translate a single text",
        "/translate/batch": "POST - translate several texts concurrently",
        "/detect": "GET/POST - detect the language of a text",
        "/languages": "GET/POST - list supported languages",
        "/health": "GET - service health",
    },
    "parameters": {
        "translate": {
            "text": "text to translate (required)",
            "from": "source language code (optional, auto-detected by default)",
            "to": "target language code (optional)",
        },
        "translate/batch": {
            "texts": 'array of texts to translate (required, e.g. ["text1", "text2"])',
            "from": "source language code (optional, auto-detected by default)",
            "to": "target language code (optional, zh-CN is accepted for zh-Hans)",
        },
        "detect": {
            "text": "text whose language should be detected (required)",
        },
    },
}


def _build_provider(settings: ServiceSettings) -> TranslationProvider:
    if not settings.provider.api_key:
        logger.warning(
            "No translator API key configured; provider calls will fail until "
            "LINGORELAY_TRANSLATOR_KEY is set."
        )
    return MicrosoftTranslatorProvider(
        settings.provider,
        defaults=settings.defaults,
        languages=load_language_table(),
    )


def create_app(
    settings: ServiceSettings | None = None,
    provider: TranslationProvider | None = None,
) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    settings = settings or load_settings()
    state = RelayState(
        settings=settings,
        languages=load_language_table(),
        provider=provider or _build_provider(settings),
    )
    init_state(app, state)

    origins: list[str] | str = list(settings.allowed_origins) or "*"
    CORS(
        app,
        resources={r"/*": {"origins": origins}},
        send_wildcard=origins == "*",
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )

    from .routes import register_routes  # routes import the service layer

    register_routes(app)

    @app.route("/", methods=["GET"])
    def service_index():
        """Describe the available endpoints and their parameters."""

        return jsonify(SERVICE_INDEX)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "provider": get_state().provider.name,
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response(message, status=400).to_response()

    @app.errorhandler(RequestValidationError)
    def handle_validation_error(error: RequestValidationError):
        """Surface missing or malformed input to clients."""

        return problem_response(str(error), status=400).to_response()

    @app.errorhandler(InternalServerError)
    def handle_internal_error(error: InternalServerError):
        """Wrap faults outside the guarded provider paths; Flask logs the traceback."""

        original = error.original_exception or error
        return problem_response(
            "Internal server error", status=500, details=str(original)
        ).to_response()

    return app
