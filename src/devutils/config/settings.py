"""devutils settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application-wide settings loaded from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Storage ---
    STORAGE_PATH: str = Field(
        default="./.devutils",
        description="Directory holding one blob file per history key.",
    )

    # --- History ---
    HISTORY_CAP: int = Field(
        default=100,
        ge=1,
        description="Maximum number of entries kept per history ledger.",
    )
    JSON_HISTORY_KEY: str = Field(
        default="json-history",
        description="Blob key for the JSON formatter history.",
    )
    TIME_HISTORY_KEY: str = Field(
        default="time-converter-history",
        description="Blob key for the time converter history.",
    )

    # --- Time rendering ---
    TIMEZONE: str | None = Field(
        default=None,
        description="IANA timezone for local rendering. Unset = host local timezone.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PROD


def get_settings() -> Settings:
    """Factory function for dependency injection via FastAPI Depends."""
    return Settings()
