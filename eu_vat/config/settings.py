from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eu_vat import __version__


class Settings(BaseSettings):
    """
    Library configuration using Pydantic BaseSettings.
    Values are loaded from environment variables and an optional .env file.
    """

    # VIES service
    VIES_BASE_URL: str = Field("https://ec.europa.eu", description="Base URL of the VIES service")
    VIES_WSDL_PATH: str = Field(
        "/taxation_customs/vies/checkVatService.wsdl",
        description="Path of the checkVatService WSDL relative to VIES_BASE_URL",
    )
    VIES_TIMEOUT: float | None = Field(
        None, description="Request timeout in seconds (None keeps the httpx default)"
    )
    VIES_USER_AGENT: str = Field(f"eu-vat-validator/{__version__}", description="User-Agent header")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Package log level")
    LOG_FORMAT: Literal["colored", "json", "plain"] = Field("colored", description="Console log format")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("VIES_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @computed_field
    @property
    def vies_wsdl_url(self) -> str:
        """Full WSDL URL."""
        return f"{self.VIES_BASE_URL}{self.VIES_WSDL_PATH}"


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    Avoids reading the environment more than once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached instance (used by tests after changing the environment)."""
    global _settings_instance
    _settings_instance = None
