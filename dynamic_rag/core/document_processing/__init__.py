"""
Document processing pipeline for ingestion.

Chunks mixed prose/code text, embeds the chunks in batches and loads them
into an ephemeral session collection.

Dependencies: pydantic, core.interfaces
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import DocumentPipeline
from .models import Block, BlockKind, EmbeddingRecord, IndexSession, PipelineResult
from .tasks import (
    BlockAssemblyTask,
    ChunkingTask,
    EmbeddingTask,
    IndexSessionTask,
    LineClassifier,
)

__all__ = [
    "DocumentPipeline",
    "Block",
    "BlockKind",
    "EmbeddingRecord",
    "IndexSession",
    "PipelineResult",
    "LineClassifier",
    "BlockAssemblyTask",
    "ChunkingTask",
    "EmbeddingTask",
    "IndexSessionTask",
]
