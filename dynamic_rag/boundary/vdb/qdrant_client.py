"""
Qdrant REST client.

Provides the collection primitives behind ephemeral session indexes: create,
upsert, similarity search and delete. Speaks the Qdrant HTTP JSON API
directly so the core depends only on its wire shapes.

Dependencies: httpx, dynamic_rag.configs, dynamic_rag.core.exceptions
System role: Vector store client for session collections
"""

import logging
from typing import Any

import httpx

from dynamic_rag.boundary.http_utils import HttpServiceClient, decode_json, ensure_success
from dynamic_rag.boundary.vdb.vector_schemas import SearchHit
from dynamic_rag.configs.vector_store import VectorStoreSettings
from dynamic_rag.core.exceptions import (
    CollectionExistsError,
    ResponseDecodingError,
    VectorStoreError,
)

logger = logging.getLogger(__name__)


class QdrantCollectionClient(HttpServiceClient):
    """HTTP client for Qdrant collection and point operations."""

    def __init__(
        self,
        base_url: str = "http://localhost:6333",
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Qdrant client.

        Args:
            base_url: Qdrant REST base URL
            timeout_seconds: Request timeout
            client: Pre-built httpx client (tests, connection sharing)
        """
        super().__init__(base_url, timeout_seconds=timeout_seconds, client=client)

    @classmethod
    def from_settings(
        cls,
        settings: VectorStoreSettings,
        client: httpx.AsyncClient | None = None,
    ) -> "QdrantCollectionClient":
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            client=client,
        )

    async def create_collection(self, collection_id: str, size: int, distance: str) -> None:
        """
        Create a collection.

        Args:
            collection_id: Collection name
            size: Vector dimension
            distance: Distance metric (Cosine, Dot, Euclid, Manhattan)

        Raises:
            CollectionExistsError: When the name is already taken
            VectorStoreError: On any other non-success status
        """
        response = await self._request(
            "PUT",
            f"/collections/{collection_id}",
            json={"vectors": {"size": size, "distance": distance}},
        )
        if response.status_code == 409 or (
            response.status_code == 400 and "already exists" in response.text
        ):
            raise CollectionExistsError(
                collection_id, status_code=response.status_code, body=response.text
            )
        ensure_success(
            response,
            VectorStoreError,
            f"Failed to create collection {collection_id}",
            operation="create",
        )

    async def upsert_points(self, collection_id: str, points: list[dict[str, Any]]) -> None:
        """
        Upsert points in one batched call and wait for them to be applied.

        Args:
            collection_id: Collection name
            points: Point dicts with id, vector and payload

        Raises:
            VectorStoreError: On non-success status
        """
        response = await self._request(
            "PUT",
            f"/collections/{collection_id}/points",
            params={"wait": "true"},
            json={"points": points},
        )
        ensure_success(
            response,
            VectorStoreError,
            f"Failed to upsert {len(points)} points into {collection_id}",
            operation="upsert",
        )

    async def search(
        self,
        collection_id: str,
        vector: list[float],
        limit: int = 3,
    ) -> list[SearchHit]:
        """
        Run a similarity search.

        Args:
            collection_id: Collection name
            vector: Query embedding
            limit: Maximum hits

        Returns:
            list[SearchHit]: Hits ordered by the store (best first)

        Raises:
            VectorStoreError: On non-success status
            ResponseDecodingError: When the response has no result array
        """
        response = await self._request(
            "POST",
            f"/collections/{collection_id}/points/search",
            json={"vector": vector, "limit": limit, "with_payload": True},
        )
        ensure_success(
            response,
            VectorStoreError,
            f"Failed to search {collection_id}",
            operation="search",
        )

        payload = decode_json(response, "Vector store")
        result = payload.get("result") if isinstance(payload, dict) else None
        if not isinstance(result, list):
            raise ResponseDecodingError(
                "Search response has no result array",
                details={"collection_id": collection_id},
            )

        try:
            return [
                SearchHit(
                    id=point["id"],
                    score=point["score"],
                    text=(point.get("payload") or {}).get("text", ""),
                )
                for point in result
            ]
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ResponseDecodingError(
                "Search response has malformed points",
                details={"collection_id": collection_id, "error": str(e)},
            ) from e

    async def delete_collection(self, collection_id: str) -> None:
        """
        Delete a collection.

        Args:
            collection_id: Collection name

        Raises:
            VectorStoreError: On non-success status
        """
        response = await self._request("DELETE", f"/collections/{collection_id}")
        ensure_success(
            response,
            VectorStoreError,
            f"Failed to delete collection {collection_id}",
            operation="delete",
        )
        logger.info("Deleted collection", extra={"collection_id": collection_id})
