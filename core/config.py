# core/config.py

"""
Runtime settings for the student records client.

Values are read from the process environment and from an optional `.env` file in
the working directory. Command-line flags parsed in `cli.main` take precedence.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # collection service base URL, without the /students suffix
    STUDENTS_API_URL: str = "http://localhost:8080"

    LOG_LEVEL: str = "WARNING"

    # attempts per call step, 1 disables automatic retry
    STUDENTS_RETRY_ATTEMPTS: int = 1
    STUDENTS_RETRY_DELAY: float = 0.5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("STUDENTS_API_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("STUDENTS_RETRY_ATTEMPTS")
    @classmethod
    def require_one_attempt(cls, value: int) -> int:
        if value < 1:
            raise ValueError("STUDENTS_RETRY_ATTEMPTS must be at least 1")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
