"""
Block model for document chunking.

A block is a maximal run of document lines sharing one classified kind.
Blocks are transient: the chunk splitter consumes them immediately.

Dependencies: dataclasses, enum
System role: Intermediate structure between block assembly and chunk splitting
"""

import enum
from dataclasses import dataclass


class BlockKind(str, enum.Enum):
    """Classified kind of a block."""

    CODE = "code"
    TEXT = "text"


@dataclass(frozen=True)
class Block:
    """Contiguous run of same-kind lines."""

    kind: BlockKind
    content: str

    @property
    def is_code(self) -> bool:
        return self.kind is BlockKind.CODE
