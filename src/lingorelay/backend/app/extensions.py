"""Per-application state shared by the relay blueprints."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app

from lingorelay.backend.app.services.provider import TranslationProvider
from lingorelay.backend.config.settings import LanguageTable, ServiceSettings

EXTENSION_KEY = "lingorelay"


@dataclass(frozen=True)
class RelayState:
    settings: ServiceSettings
    languages: LanguageTable
    provider: TranslationProvider


def init_state(app: Flask, state: RelayState) -> None:
    app.extensions[EXTENSION_KEY] = state


def get_state() -> RelayState:
    """Return the relay state bound to the active application."""

    return current_app.extensions[EXTENSION_KEY]


__all__ = ["EXTENSION_KEY", "RelayState", "get_state", "init_state"]
