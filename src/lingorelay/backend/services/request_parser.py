"""Helpers for normalising incoming relay requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from flask import Request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from lingorelay.backend.app.models import (
    BatchTranslateRequest,
    RequestValidationError,
    TextRequest,
    TranslateRequest,
    format_validation_error,
)
from lingorelay.backend.config.settings import LanguageDefaults

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class TranslationParams:
    text: str
    source: str
    target: str


@dataclass(frozen=True)
class BatchParams:
    texts: tuple[str, ...]
    source: str
    target: str


def _json_body(req: Request) -> dict[str, Any]:
    """Return the JSON object body of ``req`` or an empty mapping."""

    data = req.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")
    return dict(data)


def collect_params(req: Request) -> dict[str, Any]:
    """Merge query-string and JSON body parameters, the body taking precedence."""

    params: dict[str, Any] = dict(req.args.items())
    params.update(_json_body(req))
    return params


def _validate(model: type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(format_validation_error(exc)) from exc


def parse_translate_params(req: Request, defaults: LanguageDefaults) -> TranslationParams:
    """Validate a single translation request and apply language defaults."""

    model = _validate(TranslateRequest, collect_params(req))
    return TranslationParams(
        text=model.text,
        source=defaults.resolve_source(model.source),
        target=defaults.resolve_target(model.target, endpoint="translate"),
    )


def parse_detect_text(req: Request) -> str:
    """Return the text to run language detection on."""

    return _validate(TextRequest, collect_params(req)).text


def parse_batch_params(req: Request, defaults: LanguageDefaults) -> BatchParams:
    """Validate a batch request body and apply language defaults.

    Only the JSON body is consulted. ``texts`` is decoded into a list before
    any check so string-encoded arrays behave like real ones.
    """

    model = _validate(BatchTranslateRequest, _json_body(req))
    return BatchParams(
        texts=tuple(model.texts),
        source=defaults.resolve_source(model.source),
        target=defaults.resolve_target(model.target, endpoint="batch"),
    )


__all__ = [
    "BatchParams",
    "RequestValidationError",
    "TranslationParams",
    "collect_params",
    "parse_batch_params",
    "parse_detect_text",
    "parse_translate_params",
]
