"""
Embedding endpoint configuration settings.

Manages the OpenAI-compatible embedding endpoint used by the batcher.

Dependencies: pydantic, pydantic_settings
System role: Embedding service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding endpoint configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the embedding service (POST {base_url}/v1/embeddings)",
    )
    model: str = Field(default="nomic-embed", description="Embedding model name")
    batch_size: int = Field(default=3, gt=0, description="Chunks per embedding request")
    dimension: int | None = Field(
        default=768,
        description="Expected vector length; entries of any other length are dropped (None disables the check)",
    )
    concurrency: int = Field(
        default=1,
        gt=0,
        description="Maximum embedding batches in flight when embedding a whole document",
    )
    timeout_seconds: float = Field(default=60.0, gt=0, description="HTTP timeout in seconds")
