"""Pydantic models describing the service configuration schema."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class SourceConfig(ImmutableModel):
    """Default source language and the codes that request auto-detection."""

    default: str = "auto-detect"
    auto_sentinels: tuple[str, ...] = ("auto-detect", "auto")

    @model_validator(mode="after")
    def _validate_sentinels(self) -> Self:
        if not self.auto_sentinels:
            raise ConfigurationError("At least one auto-detection sentinel is required")
        return self


class TargetConfig(ImmutableModel):
    """Fallback target languages keyed by endpoint."""

    translate: str = "en"
    batch: str = "zh-Hans"


class ProviderConfig(ImmutableModel):
    """Connection settings for the external translation provider."""

    name: str = "microsoft"
    endpoint: str
    api_version: str = "3.0"
    timeout_seconds: float = Field(default=10.0, gt=0)
    api_key: str | None = None
    region: str | None = None

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ConfigurationError("Provider endpoint must be an http(s) URL")
        return value.rstrip("/")


class LanguageDefaults(ImmutableModel):
    """Default parameters resolved once for every incoming request."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    targets: TargetConfig = Field(default_factory=TargetConfig)
    aliases: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("aliases", mode="before")
    @classmethod
    def _coerce_alias_keys(cls, value: Any) -> Mapping[str, str]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigurationError("Language aliases must be a mapping")
        return {str(key): str(target) for key, target in value.items()}

    def is_auto(self, code: str) -> bool:
        return code in self.source.auto_sentinels

    def normalise(self, code: str) -> str:
        """Rewrite a regional alias to its canonical code."""

        return self.aliases.get(code, code)

    def resolve_source(self, value: str | None) -> str:
        if not value:
            return self.source.default
        return value

    def resolve_target(self, value: str | None, *, endpoint: str = "translate") -> str:
        """Return the effective target for ``endpoint`` with aliases applied."""

        if not value:
            value = getattr(self.targets, endpoint)
        return self.normalise(value)


class LanguageTable(ImmutableModel):
    """Static catalogue of supported language codes and display names."""

    languages: Mapping[str, str]

    @field_validator("languages", mode="before")
    @classmethod
    def _coerce_codes(cls, value: Any) -> Mapping[str, str]:
        if not isinstance(value, Mapping) or not value:
            raise ConfigurationError("Language table must be a non-empty mapping")
        return {str(code): str(name) for code, name in value.items()}

    def __contains__(self, code: object) -> bool:
        return code in self.languages

    def codes(self) -> tuple[str, ...]:
        return tuple(self.languages)


class ServiceSettings(ImmutableModel):
    """Complete runtime configuration for the relay."""

    defaults: LanguageDefaults
    provider: ProviderConfig
    allowed_origins: tuple[str, ...] = ()


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "LanguageDefaults",
    "LanguageTable",
    "ProviderConfig",
    "ServiceSettings",
    "SourceConfig",
    "TargetConfig",
]
