"""Application configuration via pydantic settings."""

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application configuration."""

    app_env: str = Field("local", alias="APP_ENV")
    app_name: str = "Store Hours Availability"

    default_timezone: str = Field("UTC", alias="DEFAULT_TIMEZONE")
    reference_week: date | None = Field(default=None, alias="REFERENCE_WEEK")
    timezone_aliases: Annotated[dict[str, str], NoDecode] = Field(
        default_factory=lambda: {
            "Europe/Kiev": "Europe/Kyiv",
            "Asia/Calcutta": "Asia/Kolkata",
        },
        alias="TIMEZONE_ALIASES",
    )

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[3] / ".env",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("timezone_aliases", mode="before")
    @classmethod
    def _split_aliases(cls, value: Any) -> Any:
        if isinstance(value, str):
            aliases: dict[str, str] = {}
            for pair in value.split(","):
                if "=" not in pair:
                    continue
                legacy, canonical = pair.split("=", 1)
                if legacy.strip() and canonical.strip():
                    aliases[legacy.strip()] = canonical.strip()
            return aliases
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()  # type: ignore[call-arg]
