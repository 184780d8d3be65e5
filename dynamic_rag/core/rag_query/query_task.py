"""
Retrieval-augmented query task.

Sends a context-grounded question to the chat-completion endpoint and
extracts the answer text. A response that decodes but lacks
choices[0].message.content yields an empty answer; transport, status and
decoding failures propagate.

Dependencies: core.interfaces, rag_prompt
System role: Answer generation for RAG sessions
"""

import logging
from typing import Any

from ..interfaces import CompletionProvider
from .rag_prompt import build_query_messages

logger = logging.getLogger(__name__)


def extract_answer(completion: Any) -> str:
    """
    Read the first completion's message text.

    Args:
        completion: Decoded completion response

    Returns:
        str: Answer text, or "" when the response shape is unexpected
    """
    try:
        content = completion["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


class RetrievalAugmentedQuery:
    """Answer questions from caller-supplied context."""

    def __init__(self, provider: CompletionProvider) -> None:
        """
        Initialize query task.

        Args:
            provider: Chat-completion endpoint client
        """
        self._provider = provider

    async def ask(self, question: str, context: str) -> str:
        """
        Answer a question using the given context.

        Args:
            question: User question
            context: Context assembled from retrieved chunks

        Returns:
            str: Answer text ("" when the response has no answer)

        Raises:
            CompletionError: When the endpoint rejects the request
            ResponseDecodingError: When the response body is not JSON
            httpx.TransportError: When the endpoint is unreachable
        """
        messages = build_query_messages(question, context)
        completion = await self._provider.complete(messages)

        answer = extract_answer(completion)
        if not answer:
            logger.warning("Completion response had no answer text")
        return answer
