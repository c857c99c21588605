"""Centralized configuration for orion-search using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings loaded from ``ORION_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    default_language: str = Field(default="en", min_length=2, description="ISO 639-1 code used when none is given")
    default_search_field: str = Field(
        default="keywords", min_length=1, description="Field searched when a query restricts none"
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Tracing
    service_name: str = Field(default="orion-search", description="OpenTelemetry service.name resource attribute")

    @field_validator("default_language")
    @classmethod
    def _lowercase_language(cls, value: str) -> str:
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        allowed = {"debug", "info", "warning", "error", "critical"}
        if value.lower() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return value.lower()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
