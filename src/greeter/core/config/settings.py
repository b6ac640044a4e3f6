from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

# stdlib spellings uvicorn rejects
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class AppSettings(BaseSettings):
    """
    Global application-level configuration.

    This class is the single source of truth for:
    - environment selection
    - logging behavior
    - listener address
    - admin shutdown behavior
    """

    model_config = SettingsConfigDict(
        env_prefix="GREETER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # ---- Environment -------------------------------------------------

    env: Literal["local", "staging", "prod"] = "local"

    # ---- Logging -----------------------------------------------------

    # Names both stdlib logging and uvicorn understand
    log_level: LogLevel = "INFO"

    # ---- Listener ----------------------------------------------------

    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=0, le=65535)

    # ---- Admin -------------------------------------------------------

    # Shared secret for the kill endpoint. Read without the GREETER_ prefix.
    admin_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ADMIN_API_KEY", "admin_api_key"),
        repr=False,
        description="Shared secret expected in the x-api-key header",
    )

    shutdown_delay_seconds: float = Field(
        default=0.1,
        ge=0.0,
        description="Delay between the kill response and process exit",
    )

    # Non-zero so a supervisor treats the exit as a crash and restarts.
    shutdown_exit_code: int = Field(default=1, ge=1, le=255)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            upper = value.strip().upper()
            return _LOG_LEVEL_ALIASES.get(upper, upper)
        return value

    @property
    def admin_enabled(self) -> bool:
        return bool(self.admin_api_key)


def get_settings() -> AppSettings:
    """
    Load settings from the current environment.

    Called once by the application factory; the result is injected
    into request handling rather than re-read per request.
    """
    return AppSettings()
