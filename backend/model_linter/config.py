"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Linter settings loaded from environment variables."""

    # Model files
    MODELS_DIR: str = "models"
    LOCALES: list[str] = ["en"]

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
