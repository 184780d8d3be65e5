"""
Base configuration settings.

Process-wide settings shared by the whole pipeline. Group-specific settings
(chunking, embedding, vector store, completion) live in their own modules
with their own env prefixes.

Dependencies: pydantic, pydantic_settings
System role: Root of the Settings aggregate
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseSettings(PydanticBaseSettings):
    """Unprefixed settings read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment label attached to nothing but logs (development, staging, production)",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level used by configure_logging()",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
