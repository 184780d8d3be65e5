"""
Embedding generation task.

Embeds one fixed-size batch of chunks per call and pairs the returned vectors
with their chunks by position. Entries the endpoint did not return, or
returned malformed, are dropped: callers compare record indices with the
chunk sequence to find them.

Dependencies: asyncio, core.interfaces
System role: Fourth stage of document ingestion pipeline
"""

import asyncio
import logging
import math
from typing import Any

from ...interfaces import EmbeddingProvider
from ..models import EmbeddingRecord

logger = logging.getLogger(__name__)


def _coerce_vector(entry: Any, dimension: int | None) -> list[float] | None:
    """
    Extract a float vector from one response entry.

    Args:
        entry: Element of the response `data` array
        dimension: Required vector length (None accepts any non-empty length)

    Returns:
        list[float] | None: Vector, or None when the entry is malformed
    """
    if not isinstance(entry, dict):
        return None
    raw = entry.get("embedding")
    if not isinstance(raw, list) or not raw:
        return None

    vector: list[float] = []
    for value in raw:
        # bool is an int subclass but never a valid component
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if not math.isfinite(value):
            return None
        vector.append(float(value))

    if dimension is not None and len(vector) != dimension:
        return None
    return vector


class EmbeddingTask:
    """Generate embeddings for chunk batches through an EmbeddingProvider."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        batch_size: int = 3,
        dimension: int | None = None,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            provider: Embedding endpoint client
            batch_size: Maximum chunks per request
            dimension: Expected vector length (None disables the check)

        Raises:
            ValueError: When batch_size or dimension is not positive
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if dimension is not None and dimension <= 0:
            raise ValueError("dimension must be positive")

        self._provider = provider
        self.batch_size = batch_size
        self.dimension = dimension

    async def embed_batch(self, chunks: list[str], start_index: int) -> list[EmbeddingRecord]:
        """
        Embed the batch of chunks starting at start_index.

        Args:
            chunks: Full chunk sequence
            start_index: Offset of the first chunk of this batch

        Returns:
            list[EmbeddingRecord]: At most batch_size records, in batch order

        Raises:
            ValueError: When start_index is negative
            EmbeddingError: When the endpoint rejects the batch
            ResponseDecodingError: When the response is not the expected JSON shape
            httpx.TransportError: When the endpoint is unreachable
        """
        if start_index < 0:
            raise ValueError("start_index cannot be negative")

        batch = chunks[start_index:start_index + self.batch_size]
        if not batch:
            return []

        entries = await self._provider.embed(batch)

        records: list[EmbeddingRecord] = []
        dropped: list[int] = []
        for offset, text in enumerate(batch):
            vector = None
            if offset < len(entries):
                vector = _coerce_vector(entries[offset], self.dimension)
            if vector is None:
                dropped.append(start_index + offset)
                continue
            records.append(
                EmbeddingRecord(index=start_index + offset, text=text, embedding=vector)
            )

        if dropped:
            logger.warning(
                "Embedding response missing or malformed for %d of %d chunks",
                len(dropped),
                len(batch),
                extra={"dropped_indices": dropped, "start_index": start_index},
            )

        return records

    async def embed_all(self, chunks: list[str], concurrency: int = 1) -> list[EmbeddingRecord]:
        """
        Embed every chunk, one request per batch.

        Args:
            chunks: Full chunk sequence
            concurrency: Maximum batches in flight

        Returns:
            list[EmbeddingRecord]: Records in chunk order (dropped chunks absent)

        Raises:
            ValueError: When concurrency is not positive
            EmbeddingError: When any batch is rejected (batches still in flight
                are cancelled)
        """
        if concurrency <= 0:
            raise ValueError("concurrency must be positive")

        offsets = list(range(0, len(chunks), self.batch_size))
        if not offsets:
            return []

        if concurrency == 1:
            records: list[EmbeddingRecord] = []
            for offset in offsets:
                records.extend(await self.embed_batch(chunks, offset))
            return records

        semaphore = asyncio.Semaphore(concurrency)

        async def _run(offset: int) -> list[EmbeddingRecord]:
            async with semaphore:
                return await self.embed_batch(chunks, offset)

        tasks = [asyncio.create_task(_run(offset)) for offset in offsets]
        try:
            batches = await asyncio.gather(*tasks)
        except BaseException:
            # One failed batch fails the whole call; stop the others
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return [record for batch in batches for record in batch]
