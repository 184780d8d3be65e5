"""
RAG session service.

Orchestrates a full query session against one document: ingest into an
ephemeral collection, answer questions from similarity-search context, and
tear the collection down.

Dependencies: dynamic_rag.core, dynamic_rag.boundary, dynamic_rag.configs, dynamic_rag.observability
System role: RAG session orchestration layer
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dynamic_rag.boundary import CompletionClient, EmbeddingClient, QdrantCollectionClient
from dynamic_rag.boundary.vdb.vector_schemas import SearchHit
from dynamic_rag.configs import Settings, get_settings
from dynamic_rag.core.document_processing import DocumentPipeline, PipelineResult
from dynamic_rag.core.exceptions import EmbeddingError, ValidationError
from dynamic_rag.core.rag_query import RetrievalAugmentedQuery
from dynamic_rag.observability import log_with_context

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n"


class RagSessionService:
    """
    Session-scoped RAG orchestration.

    Owns the three collaborator clients unless they are injected, in which
    case closing them stays with the caller.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        embedding_client: EmbeddingClient | None = None,
        index_client: QdrantCollectionClient | None = None,
        completion_client: CompletionClient | None = None,
    ) -> None:
        """
        Initialize session service.

        Args:
            settings: Application settings (get_settings() if None)
            embedding_client: Embedding endpoint client
            index_client: Qdrant client
            completion_client: Chat-completion client
        """
        self._settings = settings or get_settings()
        self._owned = []

        if embedding_client is None:
            embedding_client = EmbeddingClient.from_settings(self._settings.embedding)
            self._owned.append(embedding_client)
        if index_client is None:
            index_client = QdrantCollectionClient.from_settings(self._settings.vector_store)
            self._owned.append(index_client)
        if completion_client is None:
            completion_client = CompletionClient.from_settings(self._settings.completion)
            self._owned.append(completion_client)

        self._index_client = index_client
        self._pipeline = DocumentPipeline.from_providers(
            embedding_client, index_client, settings=self._settings
        )
        self._query = RetrievalAugmentedQuery(completion_client)

    async def ingest(self, text: str) -> PipelineResult:
        """
        Index a document into a new session collection.

        Args:
            text: Raw document text

        Returns:
            PipelineResult: Session handle and counts
        """
        result = await self._pipeline.process(text)
        if result.dropped_indices:
            log_with_context(
                logger,
                logging.WARNING,
                "Some chunks were not embedded",
                collection_id=result.collection_id,
                dropped_indices=result.dropped_indices,
            )
        return result

    async def retrieve(
        self,
        question: str,
        collection_id: str,
        top_k: int | None = None,
    ) -> list[SearchHit]:
        """
        Find the chunks most similar to a question.

        Args:
            question: User question
            collection_id: Session collection to search
            top_k: Number of hits (settings default if None)

        Returns:
            list[SearchHit]: Best hits first

        Raises:
            ValidationError: When the question is blank or top_k is not positive
            EmbeddingError: When the question could not be embedded
        """
        if not question.strip():
            raise ValidationError("Question cannot be empty", field="question")
        if top_k is None:
            top_k = self._settings.vector_store.top_k
        elif top_k < 1:
            raise ValidationError("top_k must be at least 1", field="top_k", details={"top_k": top_k})

        records = await self._pipeline.embedding_task.embed_batch([question], 0)
        if not records:
            raise EmbeddingError("Embedding endpoint returned no vector for the question")

        return await self._index_client.search(collection_id, records[0].embedding, limit=top_k)

    async def ask(self, question: str, collection_id: str, top_k: int | None = None) -> str:
        """
        Answer a question from a session collection.

        Args:
            question: User question
            collection_id: Session collection to search
            top_k: Number of hits used as context

        Returns:
            str: Answer text ("" when the completion had no answer)

        Raises:
            ValidationError: When the question is blank or top_k is not positive
        """
        hits = await self.retrieve(question, collection_id, top_k=top_k)
        context = CONTEXT_SEPARATOR.join(hit.text for hit in hits if hit.text)

        log_with_context(
            logger,
            logging.INFO,
            "Answering question",
            collection_id=collection_id,
            question=question,
            hit_count=len(hits),
        )
        return await self._query.ask(question, context)

    async def close(self, collection_id: str) -> None:
        """Delete a session collection."""
        await self._index_client.delete_collection(collection_id)

    @asynccontextmanager
    async def session(self, text: str) -> AsyncIterator[PipelineResult]:
        """
        Ingest a document for the duration of a block, then delete its collection.

        Usage:
            async with service.session(document) as result:
                answer = await service.ask("...", result.collection_id)
        """
        result = await self.ingest(text)
        try:
            yield result
        finally:
            await self.close(result.collection_id)

    async def aclose(self) -> None:
        """Close the clients this service created."""
        for client in self._owned:
            await client.aclose()
        self._owned = []

    async def __aenter__(self) -> "RagSessionService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
