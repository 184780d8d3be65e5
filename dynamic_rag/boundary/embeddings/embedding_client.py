"""
Embedding endpoint client.

Calls an OpenAI-compatible /v1/embeddings endpoint and returns the raw
`data` array, positionally aligned with the request input.

Dependencies: httpx, dynamic_rag.configs
System role: Embedding service adapter
"""

from typing import Any

import httpx

from dynamic_rag.boundary.http_utils import HttpServiceClient, decode_json, ensure_success
from dynamic_rag.configs.embedding import EmbeddingSettings
from dynamic_rag.core.exceptions import EmbeddingError, ResponseDecodingError


class EmbeddingClient(HttpServiceClient):
    """HTTP client for the embedding endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        model: str = "nomic-embed",
        timeout_seconds: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize embedding client.

        Args:
            base_url: Embedding service base URL
            model: Embedding model name
            timeout_seconds: Request timeout
            client: Pre-built httpx client (tests, connection sharing)
        """
        super().__init__(base_url, timeout_seconds=timeout_seconds, client=client)
        self.model = model

    @classmethod
    def from_settings(
        cls,
        settings: EmbeddingSettings,
        client: httpx.AsyncClient | None = None,
    ) -> "EmbeddingClient":
        return cls(
            base_url=settings.base_url,
            model=settings.model,
            timeout_seconds=settings.timeout_seconds,
            client=client,
        )

    async def embed(self, texts: list[str]) -> list[Any]:
        """
        Request embeddings for a batch of texts.

        Args:
            texts: Batch of chunk texts

        Returns:
            list[Any]: Response `data` entries (may be shorter than texts)

        Raises:
            EmbeddingError: On non-success status
            ResponseDecodingError: When the body is not JSON or has no `data` array
            httpx.TransportError: When the endpoint is unreachable
        """
        response = await self._request(
            "POST",
            "/v1/embeddings",
            json={"model": self.model, "input": texts},
        )
        ensure_success(response, EmbeddingError, "Embedding creation failed")

        payload = decode_json(response, "Embedding endpoint")
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise ResponseDecodingError(
                "Embedding response has no data array",
                details={"batch_size": len(texts)},
            )
        return data
