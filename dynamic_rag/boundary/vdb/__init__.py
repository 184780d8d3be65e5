"""
Vector database boundary layer.

Provides the Qdrant REST client used for ephemeral session collections.

Dependencies: httpx
System role: Vector store adapter for RAG retrieval
"""

from dynamic_rag.boundary.vdb.qdrant_client import QdrantCollectionClient
from dynamic_rag.boundary.vdb.vector_schemas import SearchHit

__all__ = ["QdrantCollectionClient", "SearchHit"]
