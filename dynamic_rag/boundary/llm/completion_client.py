"""
Chat-completion endpoint client.

Calls an OpenAI-compatible /v1/chat/completions endpoint and returns the
decoded response body untouched.

Dependencies: httpx, dynamic_rag.configs
System role: LLM service adapter
"""

from typing import Any

import httpx

from dynamic_rag.boundary.http_utils import HttpServiceClient, decode_json, ensure_success
from dynamic_rag.configs.completion import CompletionSettings
from dynamic_rag.core.exceptions import CompletionError


class CompletionClient(HttpServiceClient):
    """HTTP client for the chat-completion endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        model: str = "llama",
        api_key: str = "",
        timeout_seconds: float = 120.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize completion client.

        Args:
            base_url: Completion service base URL
            model: Chat model name
            api_key: Optional bearer token
            timeout_seconds: Request timeout
            client: Pre-built httpx client (tests, connection sharing)
        """
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else None
        super().__init__(base_url, timeout_seconds=timeout_seconds, headers=headers, client=client)
        self.model = model

    @classmethod
    def from_settings(
        cls,
        settings: CompletionSettings,
        client: httpx.AsyncClient | None = None,
    ) -> "CompletionClient":
        return cls(
            base_url=settings.base_url,
            model=settings.model,
            api_key=settings.api_key,
            timeout_seconds=settings.timeout_seconds,
            client=client,
        )

    async def complete(self, messages: list[dict[str, str]]) -> Any:
        """
        Submit chat messages.

        Args:
            messages: OpenAI-style role/content messages

        Returns:
            Any: Decoded completion response

        Raises:
            CompletionError: On non-success status
            ResponseDecodingError: When the body is not JSON
            httpx.TransportError: When the endpoint is unreachable
        """
        response = await self._request(
            "POST",
            "/v1/chat/completions",
            json={"model": self.model, "messages": messages},
        )
        ensure_success(response, CompletionError, "Chat completion failed")
        return decode_json(response, "Completion endpoint")
