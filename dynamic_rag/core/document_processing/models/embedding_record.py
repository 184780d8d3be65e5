"""
Embedding record model.

Pairs a chunk with the vector the embedding endpoint returned for it.

Dependencies: pydantic
System role: Output of the embedding batcher, input of the index session
"""

from pydantic import BaseModel, Field


class EmbeddingRecord(BaseModel):
    """Chunk text with its embedding vector."""

    index: int = Field(ge=0, description="Position of the chunk in the full chunk sequence")
    text: str = Field(description="Chunk text content")
    embedding: list[float] = Field(description="Embedding vector")
