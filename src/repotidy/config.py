"""Configuration management for repotidy."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepotidySettings(BaseSettings):
    """Runtime configuration sourced from environment variables and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    git_path: str | None = Field(default=None, validation_alias="GIT_PATH")
    stale_days: int = Field(default=90, validation_alias="REPOTIDY_STALE_DAYS")
    merged_days: int = Field(default=14, validation_alias="REPOTIDY_MERGED_DAYS")
    max_concurrency: int = Field(default=8, validation_alias="REPOTIDY_MAX_CONCURRENCY")
    log_level: str = Field(default="INFO", validation_alias="REPOTIDY_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(
                "REPOTIDY_LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG"
            )
        return normalized

    @field_validator("stale_days", "merged_days")
    @classmethod
    def _validate_days(cls, value: int) -> int:
        if value < 1:
            raise ValueError("branch age thresholds must be at least one day")
        return value

    @field_validator("max_concurrency")
    @classmethod
    def _validate_max_concurrency(cls, value: int) -> int:
        if value < 1:
            raise ValueError("REPOTIDY_MAX_CONCURRENCY must be >= 1")
        return value

    @model_validator(mode="after")
    def _stale_outlives_merged(self) -> "RepotidySettings":
        if self.stale_days <= self.merged_days:
            raise ValueError(
                "REPOTIDY_STALE_DAYS must be greater than REPOTIDY_MERGED_DAYS"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> RepotidySettings:
    """Return cached settings instance."""

    return RepotidySettings()


__all__ = ["RepotidySettings", "get_settings"]
