"""Concurrent fan-out of batch translation requests.

Every text in a batch becomes an independent provider call. All calls are
issued at once and joined before the aggregate is built; a failing call is
recorded against its own unit and never disturbs its siblings. There is no
backpressure, so very large batches hit the provider with that many
simultaneous requests.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from .provider import TranslationSession

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    translated_text: str
    provider_payload: Mapping[str, Any]


@dataclass(frozen=True)
class Failure:
    error_message: str


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class TranslationUnit:
    """One text from the request together with its terminal outcome."""

    index: int
    original: str
    outcome: Outcome

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Success)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"index": self.index, "original": self.original}
        if isinstance(self.outcome, Success):
            payload["translated"] = self.outcome.translated_text
            payload["result"] = dict(self.outcome.provider_payload)
        else:
            payload["error"] = self.outcome.error_message
        return payload


@dataclass(frozen=True)
class BatchResult:
    """Aggregate report for a batch, ordered by original index."""

    units: tuple[TranslationUnit, ...]

    @property
    def total(self) -> int:
        return len(self.units)

    @property
    def success(self) -> int:
        return sum(1 for unit in self.units if unit.succeeded)

    @property
    def failed(self) -> int:
        return self.total - self.success

    def as_dict(self) -> dict[str, Any]:
        return {
            "count": self.total,
            "success": self.success,
            "failed": self.failed,
            "results": [unit.as_dict() for unit in self.units],
        }


async def _translate_unit(
    session: TranslationSession,
    index: int,
    text: str,
    source: str,
    target: str,
) -> TranslationUnit:
    try:
        result = await session.translate(text, source, target)
    except Exception as exc:  # noqa: BLE001 - recorded against this unit only
        _LOGGER.warning("Batch unit %d failed: %s", index, exc)
        return TranslationUnit(index, text, Failure(str(exc)))

    return TranslationUnit(
        index,
        text,
        Success(translated_text=result.translated_text, provider_payload=result.raw),
    )


async def dispatch(
    texts: Sequence[str],
    source: str,
    target: str,
    session: TranslationSession,
) -> BatchResult:
    """Translate ``texts`` concurrently and collect every outcome."""

    tasks = [
        _translate_unit(session, index, text, source, target)
        for index, text in enumerate(texts)
    ]
    units = await asyncio.gather(*tasks)

    ordered = sorted(units, key=lambda unit: unit.index)
    result = BatchResult(units=tuple(ordered))
    _LOGGER.info(
        "Batch of %d translated to %s: %d succeeded, %d failed",
        result.total,
        target,
        result.success,
        result.failed,
    )
    return result


__all__ = [
    "BatchResult",
    "Failure",
    "Outcome",
    "Success",
    "TranslationUnit",
    "dispatch",
]
