"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Severity names loguru registers by default
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Command-line defaults loaded from ESRIGEO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ESRIGEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Coordinate components kept per vertex (2 = x/y, 3 = x/y/z)
    default_dims: int = 2

    # WKID attached as spatialReference; unset means none is emitted
    default_wkid: Optional[int] = None

    # Output
    json_indent: Optional[int] = None

    # Logging
    log_level: str = "WARNING"

    @field_validator("default_dims")
    @classmethod
    def _check_dims(cls, v: int) -> int:
        if v not in (2, 3):
            raise ValueError(f"default_dims must be 2 or 3, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


settings = Settings()
