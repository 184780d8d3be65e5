"""
Pipeline result model for document processing.

Represents the outcome of processing a document through the pipeline.

Dependencies: pydantic
System role: Return type for DocumentPipeline.process()
"""

from pydantic import BaseModel, Field

from .index_session import IndexSession


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    session: IndexSession = Field(description="Collection holding the document's vectors")
    chunk_count: int = Field(ge=0, description="Number of chunks generated")
    embedded_count: int = Field(ge=0, description="Number of chunks that received an embedding")
    dropped_indices: list[int] = Field(
        default_factory=list,
        description="Chunk positions the embedding endpoint did not answer",
    )
    processing_time_ms: float = Field(description="Total processing time in milliseconds")

    @property
    def collection_id(self) -> str:
        return self.session.collection_id
