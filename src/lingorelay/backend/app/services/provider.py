"""Adapter around the external translation provider.

The relay never translates anything itself. Every translation or detection is
a call to the Microsoft Translator REST API (the service behind Bing
Translator), made through an ``httpx.AsyncClient`` that lives for the duration
of a single request. Provider faults of any kind surface as
:class:`ProviderError` so that callers only ever deal with one failure type.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncContextManager, AsyncIterator, Mapping, Protocol

import httpx

from lingorelay.backend.config.settings import (
    LanguageDefaults,
    LanguageTable,
    ProviderConfig,
)

_LOGGER = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when the translation provider cannot satisfy a call."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class TranslationResult:
    """Translated text plus the untouched provider payload."""

    translated_text: str
    raw: Mapping[str, Any]


@dataclass(frozen=True)
class DetectionResult:
    """Detected language code plus the untouched provider payload."""

    language: str
    raw: Mapping[str, Any]


class TranslationSession(Protocol):
    """Capabilities available while a provider session is open."""

    async def translate(self, text: str, source: str, target: str) -> TranslationResult:
        ...

    async def detect(self, text: str) -> DetectionResult:
        ...


class TranslationProvider(Protocol):
    """Factory for request-scoped provider sessions."""

    name: str

    def session(self) -> AsyncContextManager[TranslationSession]:
        ...


def _extract_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, Mapping):
        error = payload.get("error")
        if isinstance(error, Mapping) and error.get("message"):
            return str(error["message"])

    return f"Provider responded with HTTP {response.status_code}"


class MicrosoftTranslatorSession:
    """Translator API v3 calls bound to one open HTTP client."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        api_version: str,
        defaults: LanguageDefaults,
        languages: LanguageTable,
    ) -> None:
        self._client = client
        self._api_version = api_version
        self._defaults = defaults
        self._languages = languages

    def _check_language(self, code: str, *, role: str) -> None:
        if self._defaults.is_auto(code) or code not in self._languages:
            raise ProviderError(f"The {role} language '{code}' is not supported")

    async def _post(self, path: str, params: dict[str, str], text: str) -> Mapping[str, Any]:
        if "Ocp-Apim-Subscription-Key" not in self._client.headers:
            raise ProviderError("Translator API key is not configured")

        try:
            response = await self._client.post(
                path,
                params={"api-version": self._api_version, **params},
                json=[{"Text": text}],
                headers={"X-ClientTraceId": str(uuid.uuid4())},
            )
        except httpx.TimeoutException as exc:
            raise ProviderError("Translation provider timed out") from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"Translation provider unreachable: {exc}") from exc

        if response.status_code >= 400:
            raise ProviderError(
                _extract_error_message(response), status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("Translation provider returned malformed JSON") from exc

        if not isinstance(payload, list) or not payload or not isinstance(payload[0], Mapping):
            raise ProviderError("Translation provider returned an unexpected payload")
        return payload[0]

    async def translate(self, text: str, source: str, target: str) -> TranslationResult:
        self._check_language(target, role="target")
        params = {"to": target}
        if not self._defaults.is_auto(source):
            self._check_language(source, role="source")
            params["from"] = source

        item = await self._post("/translate", params, text)
        translations = item.get("translations")
        if not translations or "text" not in translations[0]:
            raise ProviderError("Translation provider returned no translation")
        return TranslationResult(translated_text=str(translations[0]["text"]), raw=item)

    async def detect(self, text: str) -> DetectionResult:
        item = await self._post("/detect", {}, text)
        language = item.get("language")
        if not language:
            raise ProviderError("Translation provider could not detect a language")
        return DetectionResult(language=str(language), raw=item)


class MicrosoftTranslatorProvider:
    """Open request-scoped sessions against the Microsoft Translator API."""

    name = "microsoft"

    def __init__(
        self,
        config: ProviderConfig,
        *,
        defaults: LanguageDefaults,
        languages: LanguageTable,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._defaults = defaults
        self._languages = languages
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._config.api_key:
            headers["Ocp-Apim-Subscription-Key"] = self._config.api_key
        if self._config.region:
            headers["Ocp-Apim-Subscription-Region"] = self._config.region
        return headers

    @asynccontextmanager
    async def session(self) -> AsyncIterator[MicrosoftTranslatorSession]:
        """Yield a session whose HTTP client closes when the request ends."""

        async with httpx.AsyncClient(
            base_url=self._config.endpoint,
            headers=self._headers(),
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        ) as client:
            _LOGGER.debug("Opened translator session against %s", self._config.endpoint)
            yield MicrosoftTranslatorSession(
                client,
                api_version=self._config.api_version,
                defaults=self._defaults,
                languages=self._languages,
            )


__all__ = [
    "DetectionResult",
    "MicrosoftTranslatorProvider",
    "MicrosoftTranslatorSession",
    "ProviderError",
    "TranslationProvider",
    "TranslationResult",
    "TranslationSession",
]
