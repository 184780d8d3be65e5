"""
Index session task.

Creates one ephemeral vector collection per query session and loads
embedding records into it. Collections are never expired here: the caller
that created a session deletes it, except for a collection that could not be
filled, which the pipeline discards itself.

Dependencies: time, uuid, core.interfaces
System role: Final stage of document ingestion pipeline
"""

import logging
import time
import uuid
from typing import Callable

from ...interfaces import IndexProvider
from ..models import EmbeddingRecord, IndexSession

logger = logging.getLogger(__name__)

NAMING_SCHEMES = ("timestamp", "uuid")


def check_dimensions(records: list[EmbeddingRecord], dimension: int) -> None:
    """
    Ensure every record fits a collection of the given dimension.

    Raises:
        ValueError: On the first record whose vector length differs
    """
    for record in records:
        if len(record.embedding) != dimension:
            raise ValueError(
                f"Record {record.index} has dimension {len(record.embedding)}, "
                f"collection expects {dimension}"
            )


class IndexSessionTask:
    """Create session collections and upsert embedding records."""

    def __init__(
        self,
        provider: IndexProvider,
        vector_size: int = 768,
        distance: str = "Cosine",
        collection_prefix: str = "temp_",
        naming: str = "timestamp",
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize index session task.

        Args:
            provider: Vector index client
            vector_size: Dimension of every collection created
            distance: Distance metric of every collection created
            collection_prefix: Prefix of generated collection names
            naming: "timestamp" (epoch seconds) or "uuid"
            clock: Wall-clock source for timestamp naming

        Raises:
            ValueError: When vector_size is not positive or naming is unknown
        """
        if vector_size <= 0:
            raise ValueError("vector_size must be positive")
        if naming not in NAMING_SCHEMES:
            raise ValueError(f"naming must be one of {NAMING_SCHEMES}, got {naming!r}")

        self._provider = provider
        self.vector_size = vector_size
        self.distance = distance
        self.collection_prefix = collection_prefix
        self.naming = naming
        self._clock = clock

    def _new_collection_id(self) -> str:
        if self.naming == "uuid":
            return f"{self.collection_prefix}{uuid.uuid4().hex}"
        # Two sessions within the same second share a name; create() reports the collision.
        return f"{self.collection_prefix}{int(self._clock())}"

    async def create(self) -> IndexSession:
        """
        Create a new session collection.

        Returns:
            IndexSession: Handle of the created collection

        Raises:
            CollectionExistsError: When the generated name is already taken
            VectorStoreError: When the store rejects the request
            httpx.TransportError: When the store is unreachable
        """
        collection_id = self._new_collection_id()
        await self._provider.create_collection(collection_id, self.vector_size, self.distance)

        logger.info(
            "Created session collection",
            extra={
                "collection_id": collection_id,
                "vector_size": self.vector_size,
                "distance": self.distance,
            },
        )
        return IndexSession(
            collection_id=collection_id,
            vector_dimension=self.vector_size,
            distance_metric=self.distance,
        )

    async def upsert(self, session: IndexSession, records: list[EmbeddingRecord]) -> int:
        """
        Upsert records into a session collection in one batched call.

        Point ids are assigned sequentially from 0 in record order.

        Args:
            session: Target collection
            records: Embedding records to store

        Returns:
            int: Number of points written

        Raises:
            ValueError: When a record's vector does not match the session dimension
            VectorStoreError: When the store rejects the upsert
        """
        if not records:
            return 0

        check_dimensions(records, session.vector_dimension)

        points = [
            {
                "id": point_id,
                "vector": record.embedding,
                "payload": {"text": record.text},
            }
            for point_id, record in enumerate(records)
        ]
        await self._provider.upsert_points(session.collection_id, points)

        logger.info(
            "Upserted session points",
            extra={"collection_id": session.collection_id, "point_count": len(points)},
        )
        return len(points)

    async def discard(self, session: IndexSession) -> None:
        """
        Delete a session collection that could not be filled.

        Args:
            session: Collection to remove

        Raises:
            VectorStoreError: When the store rejects the delete
        """
        await self._provider.delete_collection(session.collection_id)
        logger.info(
            "Discarded session collection",
            extra={"collection_id": session.collection_id},
        )
