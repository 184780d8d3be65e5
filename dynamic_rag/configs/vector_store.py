"""
Vector store configuration settings.

Manages the Qdrant-compatible vector index used for ephemeral session collections.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector index service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(default="http://localhost:6333", description="Qdrant REST base URL")
    vector_size: int = Field(
        default=768,
        gt=0,
        description="Vector dimension of every session collection",
    )
    distance: Literal["Cosine", "Dot", "Euclid", "Manhattan"] = Field(
        default="Cosine",
        description="Distance metric of every session collection",
    )
    collection_prefix: str = Field(default="temp_", description="Prefix for session collection names")
    naming: Literal["timestamp", "uuid"] = Field(
        default="timestamp",
        description="Collection naming scheme: epoch seconds or a random UUID",
    )
    top_k: int = Field(default=3, ge=1, le=100, description="Number of hits used as query context")
    timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
