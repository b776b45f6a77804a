"""Pydantic models describing the public API surface."""

from __future__ import annotations

import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

__all__ = [
    "TextRequest",
    "TranslateRequest",
    "BatchTranslateRequest",
    "BatchResultEntry",
    "BatchResponse",
    "RequestValidationError",
    "format_validation_error",
    "MISSING_TEXT_ERROR",
    "MALFORMED_TEXTS_ERROR",
    "MISSING_TEXTS_ERROR",
    "NON_STRING_TEXTS_ERROR",
]


MISSING_TEXT_ERROR = "Provide the text to process (text)"
MISSING_TEXTS_ERROR = "Provide a non-empty array of texts (texts)"
NON_STRING_TEXTS_ERROR = "The texts array must only contain strings"
MALFORMED_TEXTS_ERROR = "The texts field is not a valid JSON-encoded array"


class RequestValidationError(ValueError):
    """Raised when a request is missing or carries malformed input."""


class TextRequest(BaseModel):
    """Request carrying a single required text, as used by detection."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    text: str = Field(default="", validate_default=True)

    @field_validator("text", mode="before")
    @classmethod
    def _require_text(cls, value: Any) -> Any:
        if value is None or value == "":
            raise ValueError(MISSING_TEXT_ERROR)
        return value


class TranslateRequest(TextRequest):
    """Single text translation with optional language hints."""

    source: str | None = Field(default=None, alias="from")
    target: str | None = Field(default=None, alias="to")


class BatchTranslateRequest(BaseModel):
    """Batch translation input normalised to a typed list of texts.

    ``texts`` may be sent either as a JSON array or, for older clients, as a
    string holding a JSON-encoded array. Both shapes produce the same model.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    texts: list[str] = Field(default=None, validate_default=True)  # type: ignore[assignment]
    source: str | None = Field(default=None, alias="from")
    target: str | None = Field(default=None, alias="to")

    @field_validator("texts", mode="before")
    @classmethod
    def _decode_texts(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError(MALFORMED_TEXTS_ERROR) from exc

        if not isinstance(value, list) or not value:
            raise ValueError(MISSING_TEXTS_ERROR)
        if not all(isinstance(item, str) for item in value):
            raise ValueError(NON_STRING_TEXTS_ERROR)
        return value


class BatchResultEntry(BaseModel):
    """Per-text outcome; exactly one of ``translated``/``error`` is set."""

    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., ge=0)
    original: str
    translated: str | None = None
    result: dict[str, Any] | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _single_outcome(self) -> "BatchResultEntry":
        if (self.translated is None) == (self.error is None):
            raise ValueError("Each batch entry must carry either a translation or an error")
        return self


class BatchResponse(BaseModel):
    """Aggregate batch payload returned to the caller."""

    model_config = ConfigDict(extra="forbid")

    count: int = Field(..., ge=1)
    success: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    results: list[BatchResultEntry]

    @model_validator(mode="after")
    def _counts_add_up(self) -> "BatchResponse":
        if self.success + self.failed != self.count or len(self.results) != self.count:
            raise ValueError("Batch counts do not match the number of results")
        return self


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        message = issue.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            messages.append(message.removeprefix("Value error, "))
            continue
        location = ".".join(str(part) for part in issue.get("loc", ()))
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    return "; ".join(messages) if messages else str(error)
