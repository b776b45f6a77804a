"""Service-layer helpers for the LingoRelay backend."""

from .request_parser import (
    RequestValidationError,
    parse_batch_params,
    parse_detect_text,
    parse_translate_params,
)
from .response_builder import build_batch_response, build_json_response

__all__ = [
    "RequestValidationError",
    "parse_batch_params",
    "parse_detect_text",
    "parse_translate_params",
    "build_batch_response",
    "build_json_response",
]
