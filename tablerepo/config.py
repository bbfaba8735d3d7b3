"""Configuration loaded from environment variables or a .env file."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Database and logging options for tablerepo.

    A missing .env file is ignored; environment variables take precedence.
    """

    app_name: str = "tablerepo"
    debug: bool = False  # echo SQL

    database_url: str = "sqlite:///./tablerepo.db"

    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
