"""
Text chunking task.

Turns assembled blocks into size-bounded chunks. Code is packed line by line,
prose sentence by sentence, greedily from left to right. A single line or
sentence longer than the limit is emitted whole rather than cut.

Dependencies: re, block assembly task
System role: Third stage of document chunking
"""

import logging
import re

from ..models import Block
from .block_assembly_task import BlockAssemblyTask

logger = logging.getLogger(__name__)

# A sentence is a run of non-terminators closed by one or more terminators.
# A trailing run without a terminator counts as a last sentence.
SENTENCE_PATTERN = re.compile(r"[^.!?]+(?:[.!?]+|\Z)|[.!?]+")


def split_sentences(text: str) -> list[str]:
    """
    Split prose into sentences, keeping their terminators.

    Args:
        text: Prose text

    Returns:
        list[str]: Sentences in order, untrimmed
    """
    return [match.group(0) for match in SENTENCE_PATTERN.finditer(text)]


def pack_units(units: list[str], max_size: int, separator: str) -> list[str]:
    """
    Greedily pack units into chunks no longer than max_size.

    A unit that alone exceeds max_size becomes its own chunk.

    Args:
        units: Atomic units (lines or sentences) in order
        max_size: Maximum chunk length in characters
        separator: String placed between units of one chunk

    Returns:
        list[str]: Trimmed, non-empty chunks
    """
    chunks: list[str] = []
    current = ""

    for unit in units:
        if current and len(current) + len(separator) + len(unit) > max_size:
            chunks.append(current)
            current = unit
        elif current:
            current = f"{current}{separator}{unit}"
        else:
            current = unit

    if current:
        chunks.append(current)

    return [chunk.strip() for chunk in chunks if chunk.strip()]


class ChunkingTask:
    """Split documents into size-bounded code and prose chunks."""

    def __init__(
        self,
        max_chunk_size: int = 2000,
        assembler: BlockAssemblyTask | None = None,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            max_chunk_size: Maximum chunk size in characters
            assembler: Block assembler (default classifier if None)

        Raises:
            ValueError: When max_chunk_size is not positive
        """
        if max_chunk_size <= 0:
            raise ValueError("max_chunk_size must be positive")

        self.max_chunk_size = max_chunk_size
        self._assembler = assembler or BlockAssemblyTask()

    def chunk(self, text: str) -> list[str]:
        """
        Split document text into chunks.

        Args:
            text: Raw document text (mixed prose and code)

        Returns:
            list[str]: Chunks in document order
        """
        blocks = self._assembler.assemble(text)
        chunks = self.split_blocks(blocks)

        logger.info(
            "Chunked document",
            extra={
                "block_count": len(blocks),
                "chunk_count": len(chunks),
                "max_chunk_size": self.max_chunk_size,
            },
        )
        return chunks

    def split_blocks(self, blocks: list[Block]) -> list[str]:
        """
        Split blocks into chunks.

        Args:
            blocks: Assembled blocks in document order

        Returns:
            list[str]: Trimmed, non-empty chunks
        """
        chunks: list[str] = []
        for block in blocks:
            chunks.extend(self._split_block(block))
        return chunks

    def _split_block(self, block: Block) -> list[str]:
        content = block.content.strip()
        if not content:
            return []
        if len(content) <= self.max_chunk_size:
            return [content]

        if block.is_code:
            return pack_units(content.splitlines(), self.max_chunk_size, "\n")
        sentences = [sentence.strip() for sentence in split_sentences(content)]
        return pack_units([s for s in sentences if s], self.max_chunk_size, " ")
