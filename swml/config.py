"""Builder configuration."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Builder settings loaded from environment variables."""

    # Validation (off by default, the platform rejects bad documents)
    validate_steps: bool = False

    # Serialization
    json_indent: int | None = None

    # Logging
    log_level: str = "WARNING"

    model_config = {"env_prefix": "SWML_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, value: str | None) -> str:
        if not value:
            return "WARNING"
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    logger = logging.getLogger("swml")
    logger.setLevel(settings.log_level)
    return logger
