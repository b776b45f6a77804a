"""Test configuration utilities and shared fixtures."""

import asyncio
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from lingorelay.backend.app import create_app  # noqa: E402
from lingorelay.backend.app.services.provider import (  # noqa: E402
    DetectionResult,
    ProviderError,
    TranslationResult,
)
from lingorelay.backend.config.settings import ServiceSettings, load_settings  # noqa: E402


class FakeSession:
    """Provider session driven by the scripted behaviour of ``FakeProvider``."""

    def __init__(self, provider: "FakeProvider") -> None:
        self._provider = provider

    async def translate(self, text: str, source: str, target: str) -> TranslationResult:
        self._provider.calls.append((text, source, target))
        await asyncio.sleep(self._provider.delays.get(text, 0))
        self._provider.completed.append(text)
        self._provider.started_before_completion.append(len(self._provider.calls))

        error = self._provider.failures.get(text)
        if error is not None:
            raise error

        translated = f"{target}:{text}"
        raw = {
            "detectedLanguage": {"language": "en", "score": 1.0},
            "translations": [{"text": translated, "to": target}],
        }
        return TranslationResult(translated_text=translated, raw=raw)

    async def detect(self, text: str) -> DetectionResult:
        self._provider.calls.append((text, None, None))
        error = self._provider.failures.get(text)
        if error is not None:
            raise error
        raw = {"language": "en", "score": 0.98, "isTranslationSupported": True}
        return DetectionResult(language="en", raw=raw)


class FakeProvider:
    """In-memory stand-in for the Microsoft Translator provider."""

    name = "fake"

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None, str | None]] = []
        self.completed: list[str] = []
        self.started_before_completion: list[int] = []
        self.delays: dict[str, float] = {}
        self.failures: dict[str, Exception] = {}

    def fail(self, text: str, message: str = "provider unavailable") -> None:
        self.failures[text] = ProviderError(message)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[FakeSession]:
        yield FakeSession(self)


@pytest.fixture()
def fake_provider() -> FakeProvider:
    """Return a fresh scripted provider."""

    return FakeProvider()


@pytest.fixture()
def settings() -> ServiceSettings:
    """Settings built from the bundled defaults with no environment overrides."""

    return load_settings({})


@pytest.fixture()
def app(settings: ServiceSettings, fake_provider: FakeProvider) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(settings=settings, provider=fake_provider)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
