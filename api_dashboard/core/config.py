from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment."""

    app_name: str = Field(default="API Integration Dashboard", validation_alias="APP_NAME")
    environment: str = Field(default="local", validation_alias="APP_ENV")
    version: str = Field(default="0.1.0")
    resource_path: str = Field(default="/api/users", validation_alias="DASHBOARD_RESOURCE_PATH")
    seed_records: bool = Field(default=True, validation_alias="DASHBOARD_SEED_RECORDS")
    id_strategy: Literal["uuid", "counter"] = Field(
        default="uuid", validation_alias="DASHBOARD_ID_STRATEGY"
    )
    # Unknown statuses are stored as given unless strict mode is on
    strict_status: bool = Field(default=False, validation_alias="DASHBOARD_STRICT_STATUS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "console"] = Field(default="json", validation_alias="LOG_FORMAT")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
