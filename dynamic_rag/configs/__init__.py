"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from dynamic_rag.configs.chunking import ChunkingSettings
from dynamic_rag.configs.completion import CompletionSettings
from dynamic_rag.configs.embedding import EmbeddingSettings
from dynamic_rag.configs.settings import Settings, get_settings
from dynamic_rag.configs.vector_store import VectorStoreSettings

__all__ = [
    "Settings",
    "get_settings",
    "ChunkingSettings",
    "EmbeddingSettings",
    "VectorStoreSettings",
    "CompletionSettings",
]
