"""Typed request/response models shared across the relay endpoints.

Request bodies arrive loosely typed (query strings, JSON objects, string
encoded arrays). The models here turn them into one canonical shape before any
provider call happens, so routes and services never branch on raw types.
"""

from __future__ import annotations

from .api import (
    MALFORMED_TEXTS_ERROR,
    MISSING_TEXT_ERROR,
    MISSING_TEXTS_ERROR,
    NON_STRING_TEXTS_ERROR,
    BatchResponse,
    BatchResultEntry,
    BatchTranslateRequest,
    RequestValidationError,
    TextRequest,
    TranslateRequest,
    format_validation_error,
)

__all__ = [
    "BatchResponse",
    "BatchResultEntry",
    "BatchTranslateRequest",
    "RequestValidationError",
    "TextRequest",
    "TranslateRequest",
    "format_validation_error",
    "MALFORMED_TEXTS_ERROR",
    "MISSING_TEXT_ERROR",
    "MISSING_TEXTS_ERROR",
    "NON_STRING_TEXTS_ERROR",
]
