"""Configuration loader combining bundled YAML data with environment overrides."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .schema import (
    ConfigurationError,
    LanguageDefaults,
    LanguageTable,
    ProviderConfig,
    ServiceSettings,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
DEFAULTS_FILE = CONFIG_DIRECTORY / "defaults.yaml"
LANGUAGES_FILE = CONFIG_DIRECTORY / "languages.yaml"

ENV_PREFIX = "LINGORELAY_"

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _parse_positive_float(value: str | None, *, env: str) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    if parsed <= 0:
        logger.warning("Ignoring non-positive value for %s: %s", env, value)
        return None
    return parsed


def parse_allowed_origins(raw: str | None) -> tuple[str, ...]:
    """Convert an environment variable into a normalised tuple of origins."""

    if not raw:
        return ()

    return tuple(sorted({origin.strip() for origin in raw.split(",") if origin.strip()}))


def _provider_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    endpoint = environ.get(f"{ENV_PREFIX}TRANSLATOR_ENDPOINT")
    if endpoint:
        overrides["endpoint"] = endpoint

    api_key = environ.get(f"{ENV_PREFIX}TRANSLATOR_KEY")
    if api_key:
        overrides["api_key"] = api_key

    region = environ.get(f"{ENV_PREFIX}TRANSLATOR_REGION")
    if region:
        overrides["region"] = region

    env = f"{ENV_PREFIX}TRANSLATOR_TIMEOUT"
    timeout = _parse_positive_float(environ.get(env), env=env)
    if timeout is not None:
        overrides["timeout_seconds"] = timeout

    return overrides


@lru_cache(maxsize=1)
def load_language_table() -> LanguageTable:
    """Load and cache the static language catalogue."""

    if not LANGUAGES_FILE.exists():
        raise FileNotFoundError("Language table not found")

    try:
        return LanguageTable.model_validate(_load_yaml(LANGUAGES_FILE))
    except ValidationError as error:
        raise ConfigurationError(f"Language table validation failed: {error}") from error


@lru_cache(maxsize=1)
def _load_defaults_payload() -> dict[str, Any]:
    if not DEFAULTS_FILE.exists():
        raise FileNotFoundError("Defaults configuration not found")
    return _load_yaml(DEFAULTS_FILE)


def load_settings(environ: Mapping[str, str] | None = None) -> ServiceSettings:
    """Build service settings from the bundled defaults and ``environ``."""

    environ = os.environ if environ is None else environ
    raw = _load_defaults_payload()

    provider_payload = dict(raw.get("provider") or {})
    provider_payload.update(_provider_overrides(environ))

    try:
        defaults = LanguageDefaults.model_validate(
            {key: raw[key] for key in ("source", "targets", "aliases") if key in raw}
        )
        provider = ProviderConfig.model_validate(provider_payload)
    except ValidationError as error:
        raise ConfigurationError(f"Configuration validation failed: {error}") from error

    return ServiceSettings(
        defaults=defaults,
        provider=provider,
        allowed_origins=parse_allowed_origins(environ.get(f"{ENV_PREFIX}ALLOWED_ORIGINS")),
    )


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "DEFAULTS_FILE",
    "LANGUAGES_FILE",
    "LanguageDefaults",
    "LanguageTable",
    "ProviderConfig",
    "ServiceSettings",
    "load_language_table",
    "load_settings",
    "parse_allowed_origins",
]
