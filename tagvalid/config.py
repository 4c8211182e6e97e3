"""Engine configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Rule tags
    VALIDATION_TAG_KEY: str = "valid"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    LOG_VALIDATION_RUNS: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
