"""
Block assembly task.

Groups document lines into maximal runs of code or prose. A code line that
opens a brace pulls in every following line until its braces balance, so a
function or class body always stays in one block.

Dependencies: classifier
System role: Second stage of document chunking
"""

import logging
from dataclasses import dataclass, field

from ..models import Block, BlockKind
from .classifier import LineClassifier

logger = logging.getLogger(__name__)


def _opening_depth(line: str) -> int:
    """Brace depth left open by a line, ignoring closers with nothing to close."""
    depth = 0
    for char in line:
        if char == "{":
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
    return depth


def _brace_delta(line: str) -> int:
    return line.count("{") - line.count("}")


@dataclass
class _AssemblyState:
    """Mutable state of one assembly pass."""

    buffer: list[str] = field(default_factory=list)
    depth: int = 0
    blocks: list[Block] = field(default_factory=list)

    @property
    def in_brace_body(self) -> bool:
        return self.depth > 0


class BlockAssemblyTask:
    """Split document text into ordered code/text blocks."""

    def __init__(self, classifier: LineClassifier | None = None) -> None:
        """
        Initialize block assembly with a line classifier.

        Args:
            classifier: Code-line classifier (default signal set if None)
        """
        self._classifier = classifier or LineClassifier()

    def assemble(self, text: str) -> list[Block]:
        """
        Assemble blocks from document text.

        Args:
            text: Raw document text

        Returns:
            list[Block]: Blocks in document order, content trimmed, empties skipped
        """
        state = _AssemblyState()

        for line in text.splitlines():
            if state.in_brace_body:
                state.buffer.append(line)
                state.depth = max(state.depth + _brace_delta(line), 0)
                continue

            if self._classifier.is_code(line):
                if state.buffer and not self._buffer_is_code(state.buffer):
                    self._flush(state, BlockKind.TEXT)
                state.buffer.append(line)
                if "{" in line:
                    state.depth = _opening_depth(line)
            else:
                if state.buffer and self._buffer_is_code(state.buffer):
                    self._flush(state, BlockKind.CODE)
                state.buffer.append(line)

        if state.in_brace_body:
            logger.debug("Unterminated brace body absorbed remaining lines (depth=%d)", state.depth)

        if state.buffer:
            kind = BlockKind.CODE if self._buffer_is_code(state.buffer) else BlockKind.TEXT
            self._flush(state, kind)

        return state.blocks

    def _buffer_is_code(self, buffer: list[str]) -> bool:
        """Classify the buffer by its aggregate content."""
        return self._classifier.is_code("\n".join(buffer))

    def _flush(self, state: _AssemblyState, kind: BlockKind) -> None:
        content = "\n".join(state.buffer).strip()
        state.buffer = []
        if content:
            state.blocks.append(Block(kind=kind, content=content))
