"""Application configuration helpers."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values an unset-or-default lookup treats as missing.
FALSY_VALUES = ("", "0")

DEFAULTS = {
    "app_env": "unknown",
    "app_name": "php-app",
    "app_version": "latest",
}


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables."""

    app_env: str = DEFAULTS["app_env"]
    app_name: str = DEFAULTS["app_name"]
    app_version: str = DEFAULTS["app_version"]
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"
    # Hardening switch: hide raw exception text from 500 responses.
    expose_errors: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

    @field_validator("app_env", "app_name", "app_version", mode="before")
    @classmethod
    def blank_as_default(cls, value, info):
        if value is None or value in FALSY_VALUES:
            return DEFAULTS[info.field_name]
        return value

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()


def get_settings() -> Settings:
    """Return a settings instance read from the current environment."""
    return Settings()
