"""
Shared HTTP helpers for collaborator clients.

Wraps an httpx.AsyncClient with ownership tracking and converts non-success
responses and undecodable bodies into domain exceptions. Transport errors
are left to propagate unchanged.

Dependencies: httpx, dynamic_rag.core.exceptions, dynamic_rag.observability
System role: Common plumbing for boundary clients
"""

import logging
from typing import Any

import httpx

from dynamic_rag.core.exceptions import CollaboratorError, ResponseDecodingError
from dynamic_rag.observability import log_with_context

logger = logging.getLogger(__name__)


class HttpServiceClient:
    """Base class for JSON-over-HTTP service clients."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Service base URL
            timeout_seconds: Request timeout when creating our own client
            headers: Default headers for every request
            client: Pre-built client (not closed by aclose())
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
        )
        self._headers = headers or {}

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        headers = {**self._headers, **kwargs.pop("headers", {})}
        return await self._client.request(method, self._url(path), headers=headers, **kwargs)

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def ensure_success(
    response: httpx.Response,
    error_cls: type[CollaboratorError],
    message: str,
    **error_kwargs: Any,
) -> None:
    """
    Raise error_cls when the response status is not 2xx.

    Args:
        response: Service response
        error_cls: CollaboratorError subclass to raise
        message: Error message prefix
        **error_kwargs: Extra constructor arguments for error_cls

    Raises:
        CollaboratorError: error_cls carrying status code and body text
    """
    if response.is_success:
        return

    body = response.text
    log_with_context(
        logger,
        logging.ERROR,
        message,
        url=str(response.request.url),
        status_code=response.status_code,
        response_body=body,
    )
    raise error_cls(message, status_code=response.status_code, body=body, **error_kwargs)


def decode_json(response: httpx.Response, service: str) -> Any:
    """
    Decode a JSON response body.

    Args:
        response: Service response
        service: Service name for the error message

    Returns:
        Any: Decoded JSON value

    Raises:
        ResponseDecodingError: When the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise ResponseDecodingError(
            f"{service} returned a non-JSON response",
            details={"status_code": response.status_code, "error": str(e)},
        ) from e
