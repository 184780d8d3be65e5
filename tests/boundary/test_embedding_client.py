"""
Test suite for the embedding endpoint client.

Uses httpx.MockTransport to verify the request shape and error mapping.

System role: Verification of EmbeddingClient
"""

import json

import httpx
import pytest

from dynamic_rag.boundary.embeddings import EmbeddingClient
from dynamic_rag.configs import EmbeddingSettings
from dynamic_rag.core.exceptions import EmbeddingError, ResponseDecodingError


class TestEmbeddingClient:
    """Test suite for EmbeddingClient.embed."""

    @pytest.mark.asyncio
    async def test_embed_should_post_model_and_input(self, make_http_client) -> None:
        """Test request URL and body."""
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2]}] * 2})

        client = EmbeddingClient(
            base_url="http://embed.test/",
            model="nomic-embed",
            client=make_http_client(handler),
        )

        # Act
        data = await client.embed(["one", "two"])

        # Assert
        assert data == [{"embedding": [0.1, 0.2]}, {"embedding": [0.1, 0.2]}]
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "http://embed.test/v1/embeddings"
        assert json.loads(seen[0].content) == {"model": "nomic-embed", "input": ["one", "two"]}

    @pytest.mark.asyncio
    async def test_non_success_status_should_raise_with_body(self, make_http_client) -> None:
        """Test a failed batch carries status and response text."""
        client = EmbeddingClient(
            base_url="http://embed.test",
            client=make_http_client(lambda request: httpx.Response(500, text="model not loaded")),
        )

        with pytest.raises(EmbeddingError) as exc_info:
            await client.embed(["x"])

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "model not loaded"
        assert "Embedding creation failed" in str(exc_info.value)
        assert "model not loaded" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_body_should_raise_decoding_error(self, make_http_client) -> None:
        """Test an undecodable body is a terminal decoding failure."""
        client = EmbeddingClient(
            base_url="http://embed.test",
            client=make_http_client(lambda request: httpx.Response(200, text="<html>")),
        )

        with pytest.raises(ResponseDecodingError):
            await client.embed(["x"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": "nope"}, [1, 2]])
    async def test_missing_data_array_should_raise_decoding_error(
        self, make_http_client, payload
    ) -> None:
        """Test a response without a data list is rejected."""
        client = EmbeddingClient(
            base_url="http://embed.test",
            client=make_http_client(lambda request: httpx.Response(200, json=payload)),
        )

        with pytest.raises(ResponseDecodingError):
            await client.embed(["x"])

    @pytest.mark.asyncio
    async def test_short_data_array_should_be_returned_as_is(self, make_http_client) -> None:
        """Test the client leaves positional correlation to the batcher."""
        client = EmbeddingClient(
            base_url="http://embed.test",
            client=make_http_client(
                lambda request: httpx.Response(200, json={"data": [{"embedding": [1.0]}]})
            ),
        )

        assert await client.embed(["a", "b", "c"]) == [{"embedding": [1.0]}]

    @pytest.mark.asyncio
    async def test_transport_error_should_propagate(self, make_http_client) -> None:
        """Test connectivity failures are not wrapped."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = EmbeddingClient(base_url="http://embed.test", client=make_http_client(handler))

        with pytest.raises(httpx.ConnectError):
            await client.embed(["x"])

    @pytest.mark.asyncio
    async def test_aclose_should_not_close_injected_client(self, make_http_client) -> None:
        """Test callers keep ownership of clients they pass in."""
        http_client = make_http_client(lambda request: httpx.Response(200, json={"data": []}))
        client = EmbeddingClient(base_url="http://embed.test", client=http_client)

        await client.aclose()

        assert not http_client.is_closed
        await http_client.aclose()

    def test_from_settings_should_copy_endpoint_and_model(self) -> None:
        """Test settings mapping."""
        settings = EmbeddingSettings(_env_file=None, base_url="http://e.test", model="m")

        client = EmbeddingClient.from_settings(settings)

        assert client.base_url == "http://e.test"
        assert client.model == "m"
