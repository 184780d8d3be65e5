"""
Chat-completion service boundary.
"""

from dynamic_rag.boundary.llm.completion_client import CompletionClient

__all__ = ["CompletionClient"]
