"""Unit tests for configuration loading and language defaults."""

from __future__ import annotations

import pytest

from lingorelay.backend.config.settings import (
    ConfigurationError,
    load_language_table,
    load_settings,
    parse_allowed_origins,
)


def test_bundled_defaults_match_documented_fallbacks() -> None:
    settings = load_settings({})

    assert settings.defaults.resolve_source(None) == "auto-detect"
    assert settings.defaults.resolve_target(None, endpoint="translate") == "en"
    assert settings.defaults.resolve_target(None, endpoint="batch") == "zh-Hans"
    assert settings.provider.endpoint == "https://api.cognitive.microsofttranslator.com"
    assert settings.provider.api_key is None
    assert settings.allowed_origins == ()


def test_regional_alias_is_rewritten() -> None:
    defaults = load_settings({}).defaults

    assert defaults.resolve_target("zh-CN", endpoint="batch") == "zh-Hans"
    assert defaults.resolve_target("zh-CN") == "zh-Hans"
    assert defaults.resolve_target("fr") == "fr"


def test_environment_overrides_provider_settings() -> None:
    settings = load_settings(
        {
            "LINGORELAY_TRANSLATOR_ENDPOINT": "https://proxy.example/translator/",
            "LINGORELAY_TRANSLATOR_KEY": "secret",
            "LINGORELAY_TRANSLATOR_REGION": "westeurope",
            "LINGORELAY_TRANSLATOR_TIMEOUT": "2.5",
            "LINGORELAY_ALLOWED_ORIGINS": "https://b.test, https://a.test,",
        }
    )

    assert settings.provider.endpoint == "https://proxy.example/translator"
    assert settings.provider.api_key == "secret"
    assert settings.provider.region == "westeurope"
    assert settings.provider.timeout_seconds == 2.5
    assert settings.allowed_origins == ("https://a.test", "https://b.test")


@pytest.mark.parametrize("value", ["soon", "-1", "0"])
def test_invalid_timeout_is_ignored(value: str, caplog: pytest.LogCaptureFixture) -> None:
    settings = load_settings({"LINGORELAY_TRANSLATOR_TIMEOUT": value})

    assert settings.provider.timeout_seconds == 10
    assert "LINGORELAY_TRANSLATOR_TIMEOUT" in caplog.text


def test_invalid_endpoint_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        load_settings({"LINGORELAY_TRANSLATOR_ENDPOINT": "ftp://translator"})


def test_language_table_lists_auto_detect_and_chinese_scripts() -> None:
    table = load_language_table()

    assert table.languages["auto-detect"] == "Auto-detect"
    assert "zh-Hans" in table
    assert "zh-Hant" in table
    assert "zh-CN" not in table


def test_parse_allowed_origins_handles_empty_values() -> None:
    assert parse_allowed_origins(None) == ()
    assert parse_allowed_origins(" , ") == ()
