"""
Document pipeline orchestrator.

Coordinates chunking, batched embedding and session-collection loading for
one document.

Dependencies: All task modules, core.interfaces
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from ..exceptions import DynamicRagException
from ..interfaces import EmbeddingProvider, IndexProvider
from .models import IndexSession, PipelineResult
from .tasks import ChunkingTask, EmbeddingTask, IndexSessionTask
from .tasks.index_session_task import check_dimensions

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: chunk -> embed -> create collection -> upsert."""

    def __init__(
        self,
        chunking_task: ChunkingTask,
        embedding_task: EmbeddingTask,
        index_task: IndexSessionTask,
        embedding_concurrency: int = 1,
    ) -> None:
        """
        Initialize pipeline with its tasks.

        Args:
            chunking_task: Splits text into chunks
            embedding_task: Embeds chunk batches
            index_task: Creates and fills the session collection
            embedding_concurrency: Maximum embedding batches in flight
        """
        self._chunking_task = chunking_task
        self._embedding_task = embedding_task
        self._index_task = index_task
        self._embedding_concurrency = embedding_concurrency

    @classmethod
    def from_providers(
        cls,
        embedding_provider: EmbeddingProvider,
        index_provider: IndexProvider,
        settings=None,
    ) -> "DocumentPipeline":
        """
        Build a pipeline from collaborator clients and application settings.

        Args:
            embedding_provider: Embedding endpoint client
            index_provider: Vector index client
            settings: Application settings (get_settings() if None)

        Returns:
            DocumentPipeline: Configured pipeline
        """
        if settings is None:
            from dynamic_rag.configs import get_settings

            settings = get_settings()

        return cls(
            chunking_task=ChunkingTask(max_chunk_size=settings.chunking.max_chunk_size),
            embedding_task=EmbeddingTask(
                embedding_provider,
                batch_size=settings.embedding.batch_size,
                dimension=settings.embedding.dimension,
            ),
            index_task=IndexSessionTask(
                index_provider,
                vector_size=settings.vector_store.vector_size,
                distance=settings.vector_store.distance,
                collection_prefix=settings.vector_store.collection_prefix,
                naming=settings.vector_store.naming,
            ),
            embedding_concurrency=settings.embedding.concurrency,
        )

    @property
    def embedding_task(self) -> EmbeddingTask:
        return self._embedding_task

    async def process(self, text: str) -> PipelineResult:
        """
        Process a document through the full pipeline.

        Args:
            text: Raw document text

        Returns:
            PipelineResult: Session handle, counts and dropped chunk positions

        Raises:
            ValueError: When the document yields no chunks or a vector does not
                fit the configured collection size
            EmbeddingError: When an embedding batch is rejected
            CollectionExistsError: When the session name collides
            VectorStoreError: When collection creation or upsert fails (a collection
                that was created but not filled is deleted first, and its id is
                added to the error details)
        """
        start_time = time.perf_counter()

        chunks = self._chunking_task.chunk(text)
        if not chunks:
            raise ValueError("No content to index")

        records = await self._embedding_task.embed_all(
            chunks, concurrency=self._embedding_concurrency
        )
        answered = {record.index for record in records}
        dropped = [index for index in range(len(chunks)) if index not in answered]

        # Reject unusable vectors before anything exists on the server
        check_dimensions(records, self._index_task.vector_size)

        session = await self._index_task.create()
        try:
            await self._index_task.upsert(session, records)
        except Exception as e:
            await self._rollback(session, e)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Indexed document",
            extra={
                "collection_id": session.collection_id,
                "chunk_count": len(chunks),
                "embedded_count": len(records),
                "processing_time_ms": round(elapsed_ms, 1),
            },
        )

        return PipelineResult(
            session=session,
            chunk_count=len(chunks),
            embedded_count=len(records),
            dropped_indices=dropped,
            processing_time_ms=elapsed_ms,
        )

    async def _rollback(self, session: IndexSession, error: Exception) -> None:
        """Delete a collection left empty by a failed upsert."""
        if isinstance(error, DynamicRagException):
            error.details.setdefault("collection_id", session.collection_id)

        try:
            await self._index_task.discard(session)
        except Exception:
            # The upsert failure is what propagates; the orphan is only logged
            logger.exception(
                "Failed to discard collection after upsert failure",
                extra={"collection_id": session.collection_id},
            )
