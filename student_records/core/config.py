"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "student_records"

    # Logging
    log_level: str = "INFO"

    # App
    debug: bool = False

    @property
    def effective_log_level(self) -> str:
        """DEBUG wins over the configured level when debug mode is on."""
        return "DEBUG" if self.debug else self.log_level.upper()

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
