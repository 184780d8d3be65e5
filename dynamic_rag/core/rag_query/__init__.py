"""
Retrieval-augmented query.

Builds context-grounded chat requests and extracts answers.
"""

from .query_task import RetrievalAugmentedQuery, extract_answer
from .rag_prompt import RAG_QUERY_PROMPT, SYSTEM_PROMPT, build_query_messages

__all__ = [
    "RetrievalAugmentedQuery",
    "extract_answer",
    "RAG_QUERY_PROMPT",
    "SYSTEM_PROMPT",
    "build_query_messages",
]
