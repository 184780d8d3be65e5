"""
Shared test fixtures and configuration for entire test suite.

Provides: fake collaborator providers, httpx mock transports, settings without .env
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from dynamic_rag.configs import (
    ChunkingSettings,
    CompletionSettings,
    EmbeddingSettings,
    Settings,
    VectorStoreSettings,
)


def vector(dimension: int, value: float = 0.1) -> list[float]:
    """Build a constant vector of the given dimension."""
    return [value] * dimension


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """
    Build AsyncClients backed by a request handler.

    Returns:
        Callable: handler -> httpx.AsyncClient using MockTransport
    """
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def embedding_provider() -> AsyncMock:
    """
    Create a fake embedding provider answering every text with a 4-dim vector.

    Returns:
        AsyncMock: Provider whose embed() mirrors the request length
    """
    provider = AsyncMock()

    async def _embed(texts: list[str]) -> list[dict]:
        return [{"embedding": vector(4, float(i + 1))} for i in range(len(texts))]

    provider.embed = AsyncMock(side_effect=_embed)
    return provider


@pytest.fixture
def index_provider() -> AsyncMock:
    """
    Create a fake vector index provider.

    Returns:
        AsyncMock: Provider with async create_collection / upsert_points / delete_collection
    """
    provider = AsyncMock()
    provider.create_collection = AsyncMock(return_value=None)
    provider.upsert_points = AsyncMock(return_value=None)
    provider.delete_collection = AsyncMock(return_value=None)
    return provider


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings with small sizes, isolated from the environment's .env file.

    Returns:
        Settings: 4-dim vectors, batch size 2, 200 char chunks
    """
    return Settings(
        _env_file=None,
        chunking=ChunkingSettings(_env_file=None, max_chunk_size=200),
        embedding=EmbeddingSettings(
            _env_file=None,
            base_url="http://embed.test",
            batch_size=2,
            dimension=4,
        ),
        vector_store=VectorStoreSettings(
            _env_file=None,
            base_url="http://qdrant.test",
            vector_size=4,
            top_k=2,
        ),
        completion=CompletionSettings(
            _env_file=None,
            base_url="http://llm.test",
            model="test-model",
        ),
    )
