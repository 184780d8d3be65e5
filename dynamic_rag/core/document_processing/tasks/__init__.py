"""
Task modules for document processing pipeline.

Exports: LineClassifier, BlockAssemblyTask, ChunkingTask, EmbeddingTask, IndexSessionTask
"""

from .block_assembly_task import BlockAssemblyTask
from .chunking_task import ChunkingTask, split_sentences
from .classifier import DEFAULT_SIGNALS, CodeSignal, LineClassifier, RegexSignal, is_code_line
from .embedding_task import EmbeddingTask
from .index_session_task import IndexSessionTask

__all__ = [
    "CodeSignal",
    "RegexSignal",
    "DEFAULT_SIGNALS",
    "LineClassifier",
    "is_code_line",
    "BlockAssemblyTask",
    "ChunkingTask",
    "split_sentences",
    "EmbeddingTask",
    "IndexSessionTask",
]
