"""
Test suite for the document ingestion pipeline.

Verifies chunk -> embed -> create collection -> upsert orchestration with
fake collaborators.

System role: Verification of DocumentPipeline
"""

from unittest.mock import AsyncMock

import pytest

from dynamic_rag.configs import Settings
from dynamic_rag.core.document_processing import DocumentPipeline, PipelineResult
from dynamic_rag.core.document_processing.tasks import (
    ChunkingTask,
    EmbeddingTask,
    IndexSessionTask,
)
from dynamic_rag.core.exceptions import CollectionExistsError, EmbeddingError, VectorStoreError

DOCUMENT = "\n".join([
    "Intro paragraph about the module.",
    "function add(a, b) {",
    "  return a + b;",
    "}",
    "Closing remarks.",
])


@pytest.fixture
def pipeline(
    embedding_provider: AsyncMock,
    index_provider: AsyncMock,
    test_settings: Settings,
) -> DocumentPipeline:
    return DocumentPipeline.from_providers(
        embedding_provider, index_provider, settings=test_settings
    )


class TestDocumentPipeline:
    """Test suite for DocumentPipeline.process."""

    @pytest.mark.asyncio
    async def test_process_should_index_every_chunk(
        self,
        pipeline: DocumentPipeline,
        embedding_provider: AsyncMock,
        index_provider: AsyncMock,
    ) -> None:
        """Test a mixed document ends up fully indexed in one new collection."""
        # Act
        result = await pipeline.process(DOCUMENT)

        # Assert
        assert isinstance(result, PipelineResult)
        assert result.chunk_count == 3
        assert result.embedded_count == 3
        assert result.dropped_indices == []
        assert result.collection_id.startswith("temp_")
        assert result.session.vector_dimension == 4

        # batch_size=2 -> two requests for three chunks
        assert embedding_provider.embed.await_count == 2
        index_provider.create_collection.assert_awaited_once_with(
            result.collection_id, 4, "Cosine"
        )
        _, points = index_provider.upsert_points.await_args.args
        assert [point["payload"]["text"] for point in points] == [
            "Intro paragraph about the module.",
            "function add(a, b) {\n  return a + b;\n}",
            "Closing remarks.",
        ]

    @pytest.mark.asyncio
    async def test_short_embedding_response_should_report_dropped_indices(
        self,
        index_provider: AsyncMock,
        test_settings: Settings,
    ) -> None:
        """Test chunks without a returned vector are reported, not indexed."""
        # Arrange
        provider = AsyncMock()
        provider.embed = AsyncMock(side_effect=[
            [{"embedding": [0.1] * 4}],
            [{"embedding": [0.3] * 4}],
        ])
        pipeline = DocumentPipeline.from_providers(provider, index_provider, settings=test_settings)

        # Act
        result = await pipeline.process(DOCUMENT)

        # Assert
        assert result.chunk_count == 3
        assert result.embedded_count == 2
        assert result.dropped_indices == [1]
        _, points = index_provider.upsert_points.await_args.args
        assert [point["id"] for point in points] == [0, 1]
        assert points[1]["payload"]["text"] == "Closing remarks."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   \n\n  \t"])
    async def test_empty_document_should_raise_before_any_request(
        self,
        pipeline: DocumentPipeline,
        embedding_provider: AsyncMock,
        index_provider: AsyncMock,
        text: str,
    ) -> None:
        """Test nothing is created for a document without content."""
        with pytest.raises(ValueError, match="No content"):
            await pipeline.process(text)

        embedding_provider.embed.assert_not_awaited()
        index_provider.create_collection.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_embedding_failure_should_stop_before_collection_creation(
        self,
        index_provider: AsyncMock,
        test_settings: Settings,
    ) -> None:
        """Test a rejected batch aborts the pipeline."""
        provider = AsyncMock()
        provider.embed = AsyncMock(side_effect=EmbeddingError("Embedding creation failed", status_code=503))
        pipeline = DocumentPipeline.from_providers(provider, index_provider, settings=test_settings)

        with pytest.raises(EmbeddingError):
            await pipeline.process(DOCUMENT)

        index_provider.create_collection.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_collection_collision_should_propagate(
        self,
        pipeline: DocumentPipeline,
        index_provider: AsyncMock,
    ) -> None:
        """Test a name collision is surfaced and nothing is upserted."""
        index_provider.create_collection.side_effect = CollectionExistsError("temp_1", status_code=409)

        with pytest.raises(CollectionExistsError):
            await pipeline.process(DOCUMENT)

        index_provider.upsert_points.assert_not_awaited()
        index_provider.delete_collection.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_embedding_should_keep_chunk_order(
        self,
        embedding_provider: AsyncMock,
        index_provider: AsyncMock,
    ) -> None:
        """Test concurrency does not reorder upserted points."""
        # Arrange
        pipeline = DocumentPipeline(
            chunking_task=ChunkingTask(max_chunk_size=40),
            embedding_task=EmbeddingTask(embedding_provider, batch_size=1, dimension=4),
            index_task=IndexSessionTask(index_provider, vector_size=4),
            embedding_concurrency=3,
        )
        text = "First sentence here. Second sentence here. Third sentence here. Fourth one."

        # Act
        result = await pipeline.process(text)

        # Assert
        _, points = index_provider.upsert_points.await_args.args
        assert result.embedded_count == result.chunk_count
        assert " ".join(point["payload"]["text"] for point in points) == text


class TestFailedUpsert:
    """Test suite for collections left behind by a failed ingest."""

    @pytest.fixture
    def pipeline(self, embedding_provider: AsyncMock, index_provider: AsyncMock) -> DocumentPipeline:
        return DocumentPipeline(
            chunking_task=ChunkingTask(max_chunk_size=200),
            embedding_task=EmbeddingTask(embedding_provider, batch_size=2),
            index_task=IndexSessionTask(index_provider, vector_size=4, clock=lambda: 1700000000.0),
        )

    @pytest.mark.asyncio
    async def test_upsert_failure_should_delete_collection_and_name_it(
        self, pipeline: DocumentPipeline, index_provider: AsyncMock
    ) -> None:
        """Test the created collection is removed and identified in the error."""
        # Arrange
        index_provider.upsert_points.side_effect = VectorStoreError(
            "Failed to upsert", operation="upsert", status_code=500
        )

        # Act
        with pytest.raises(VectorStoreError) as exc_info:
            await pipeline.process(DOCUMENT)

        # Assert
        assert exc_info.value.details["collection_id"] == "temp_1700000000"
        assert exc_info.value.details["operation"] == "upsert"
        index_provider.delete_collection.assert_awaited_once_with("temp_1700000000")

    @pytest.mark.asyncio
    async def test_transport_failure_during_upsert_should_still_delete_collection(
        self, pipeline: DocumentPipeline, index_provider: AsyncMock
    ) -> None:
        """Test non-domain errors propagate unchanged after cleanup."""
        index_provider.upsert_points.side_effect = ConnectionError("reset by peer")

        with pytest.raises(ConnectionError):
            await pipeline.process(DOCUMENT)

        index_provider.delete_collection.assert_awaited_once_with("temp_1700000000")

    @pytest.mark.asyncio
    async def test_failed_cleanup_should_not_mask_upsert_error(
        self, pipeline: DocumentPipeline, index_provider: AsyncMock
    ) -> None:
        """Test the upsert error wins when the delete also fails."""
        index_provider.upsert_points.side_effect = VectorStoreError(
            "Failed to upsert", operation="upsert", status_code=500
        )
        index_provider.delete_collection.side_effect = VectorStoreError(
            "Failed to delete", operation="delete", status_code=503
        )

        with pytest.raises(VectorStoreError) as exc_info:
            await pipeline.process(DOCUMENT)

        assert exc_info.value.operation == "upsert"

    @pytest.mark.asyncio
    async def test_dimension_mismatch_should_raise_before_collection_exists(
        self, index_provider: AsyncMock
    ) -> None:
        """Test unchecked embedding sizes are caught before create()."""
        # Arrange
        provider = AsyncMock()
        provider.embed = AsyncMock(
            side_effect=lambda texts: [{"embedding": [0.5] * 3} for _ in texts]
        )
        pipeline = DocumentPipeline(
            chunking_task=ChunkingTask(max_chunk_size=200),
            embedding_task=EmbeddingTask(provider, batch_size=3, dimension=None),
            index_task=IndexSessionTask(index_provider, vector_size=4),
        )

        # Act
        with pytest.raises(ValueError, match="collection expects 4"):
            await pipeline.process(DOCUMENT)

        # Assert
        index_provider.create_collection.assert_not_awaited()
        index_provider.upsert_points.assert_not_awaited()


class TestFromProviders:
    """Test suite for DocumentPipeline.from_providers."""

    def test_should_apply_settings_to_tasks(
        self,
        embedding_provider: AsyncMock,
        index_provider: AsyncMock,
        test_settings: Settings,
    ) -> None:
        """Test batch size and dimension flow from settings."""
        pipeline = DocumentPipeline.from_providers(
            embedding_provider, index_provider, settings=test_settings
        )

        assert pipeline.embedding_task.batch_size == 2
        assert pipeline.embedding_task.dimension == 4
