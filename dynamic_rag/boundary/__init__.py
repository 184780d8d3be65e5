"""
Boundary layer.

HTTP clients for the external collaborators: embedding endpoint, vector
index service and chat-completion endpoint.
"""

from dynamic_rag.boundary.embeddings import EmbeddingClient
from dynamic_rag.boundary.llm import CompletionClient
from dynamic_rag.boundary.vdb import QdrantCollectionClient, SearchHit

__all__ = ["EmbeddingClient", "CompletionClient", "QdrantCollectionClient", "SearchHit"]
