"""
Chunking configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Size bound for the chunk splitter
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkingSettings(BaseSettings):
    """Chunk splitter configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_chunk_size: int = Field(
        default=2000,
        gt=0,
        description="Maximum characters per chunk (oversized single lines/sentences excepted)",
    )
