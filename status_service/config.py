from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_NAME = "demo-app-service"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class AppSettings(BaseSettings):
    service_name: str = SERVICE_NAME
    app_env: str = "development"
    log_level: LogLevel = "INFO"
    host: str = "0.0.0.0"
    # PORT is read unprefixed, as container platforms set it
    port: int = Field(default=8080, ge=1, le=65535, validation_alias=AliasChoices("PORT", "APP_PORT"))

    # empty values (PORT="") fall back to the defaults
    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class AltAppSettings(AppSettings):
    """Second instance; differs only in the default port."""

    port: int = Field(default=8088, ge=1, le=65535, validation_alias=AliasChoices("PORT", "APP_PORT"))
