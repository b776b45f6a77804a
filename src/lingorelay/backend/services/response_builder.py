"""Utilities for serialising relay responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

from flask import jsonify

from lingorelay.backend.app.models import BatchResponse
from lingorelay.backend.app.services.batch import BatchResult

ResponseTuple = Tuple[Any, int]


def build_json_response(payload: Mapping[str, Any]) -> ResponseTuple:
    """Return a Flask JSON response for a provider ``payload``."""

    return jsonify(dict(payload)), 200


def build_batch_response(result: BatchResult) -> ResponseTuple:
    """Validate and serialise the aggregate of a batch translation."""

    response = BatchResponse.model_validate(result.as_dict())
    return jsonify(response.model_dump(mode="json", exclude_unset=True)), 200
