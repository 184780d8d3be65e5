"""
Unified application settings.

Aggregates all configuration modules into a single Settings class and
checks the constraints that span more than one of them.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, model_validator

from dynamic_rag.configs.base import BaseSettings
from dynamic_rag.configs.chunking import ChunkingSettings
from dynamic_rag.configs.completion import CompletionSettings
from dynamic_rag.configs.embedding import EmbeddingSettings
from dynamic_rag.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    completion: CompletionSettings = Field(default_factory=CompletionSettings)

    @model_validator(mode="after")
    def check_vector_dimensions(self) -> "Settings":
        """Embeddings must fit the session collections they are upserted into."""
        expected = self.embedding.dimension
        if expected is not None and expected != self.vector_store.vector_size:
            raise ValueError(
                f"embedding.dimension ({expected}) must equal "
                f"vector_store.vector_size ({self.vector_store.vector_size})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables loaded once on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from dynamic_rag.configs import get_settings
        settings = get_settings()
    """
    return Settings()
