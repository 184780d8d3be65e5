"""
Capability interfaces for external collaborators.

The core talks to the embedding, vector index and chat-completion services
only through these protocols. boundary/ provides the HTTP implementations.

Dependencies: typing
System role: Seam between core logic and network clients
"""

from typing import Any, Protocol


class EmbeddingProvider(Protocol):
    """Turns a batch of texts into the raw, positionally aligned `data` entries."""

    async def embed(self, texts: list[str]) -> list[Any]:
        ...


class IndexProvider(Protocol):
    """Vector index primitives needed to build (or roll back) a session collection."""

    async def create_collection(self, collection_id: str, size: int, distance: str) -> None:
        ...

    async def upsert_points(self, collection_id: str, points: list[dict[str, Any]]) -> None:
        ...

    async def delete_collection(self, collection_id: str) -> None:
        ...


class CompletionProvider(Protocol):
    """Submits chat messages and returns the decoded completion response."""

    async def complete(self, messages: list[dict[str, str]]) -> Any:
        ...
