"""
Embedding service boundary.
"""

from dynamic_rag.boundary.embeddings.embedding_client import EmbeddingClient

__all__ = ["EmbeddingClient"]
