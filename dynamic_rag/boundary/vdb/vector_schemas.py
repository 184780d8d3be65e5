"""
Vector database schemas.

Pydantic models for vector search results.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """Single result from a similarity search."""

    id: int | str = Field(description="Point identifier")
    score: float = Field(description="Similarity score under the collection's metric")
    text: str = Field(default="", description="Chunk text stored in the point payload")
