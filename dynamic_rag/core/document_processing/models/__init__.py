"""
Models for document processing pipeline.

Exports: Block, BlockKind, EmbeddingRecord, IndexSession, PipelineResult
"""

from .block import Block, BlockKind
from .embedding_record import EmbeddingRecord
from .index_session import IndexSession
from .pipeline_result import PipelineResult

__all__ = [
    "Block",
    "BlockKind",
    "EmbeddingRecord",
    "IndexSession",
    "PipelineResult",
]
