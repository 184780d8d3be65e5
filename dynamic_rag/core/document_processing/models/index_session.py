"""
Index session model.

Handle for one ephemeral vector collection. The creating caller owns it and
is responsible for tearing the collection down.

Dependencies: pydantic
System role: Return type of IndexSessionTask.create()
"""

from pydantic import BaseModel, Field


class IndexSession(BaseModel):
    """Ephemeral per-query-session vector collection."""

    collection_id: str = Field(description="Collection name in the vector store")
    vector_dimension: int = Field(gt=0, description="Vector size of the collection")
    distance_metric: str = Field(description="Distance metric of the collection")
