"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    LOG_VALIDATION_RUNS: bool = True

    # Message rendering
    FULL_MESSAGE_FORMAT: str = "{attribute} {message}"
    HUMANIZE_ATTRIBUTES: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RECORDGUARD_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
