"""
Core business logic module.

Contains the exception hierarchy, collaborator interfaces, the document
processing pipeline and the retrieval-augmented query.
"""

from dynamic_rag.core.exceptions import (
    CollaboratorError,
    CollectionExistsError,
    CompletionError,
    DynamicRagException,
    EmbeddingError,
    ResponseDecodingError,
    ValidationError,
    VectorStoreError,
)

from dynamic_rag.core.document_processing import DocumentPipeline
from dynamic_rag.core.rag_query import RetrievalAugmentedQuery

__all__ = [
    # Exceptions
    "DynamicRagException",
    "ValidationError",
    "ResponseDecodingError",
    "CollaboratorError",
    "EmbeddingError",
    "VectorStoreError",
    "CollectionExistsError",
    "CompletionError",
    # Business logic
    "DocumentPipeline",
    "RetrievalAugmentedQuery",
]
