"""
Logging utilities for safe structured logging.

Chunk text, questions and embedding vectors can be large, so every context
value is summarized or flattened to a short preview before it reaches a
handler.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

# Short integer lists (dropped chunk indices, ids) are logged in full
MAX_INLINE_ITEMS = 10


def preview(text: str, max_length: int = 200) -> str:
    """
    Flatten text to one line and truncate it.

    Args:
        text: Chunk, question or response text
        max_length: Maximum preview length

    Returns:
        str: Single-line preview
    """
    flattened = " ".join(text.split())
    if len(flattened) <= max_length:
        return flattened
    return f"{flattened[:max_length]}... ({len(text)} chars)"


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            return preview(value, max_length)
        if isinstance(value, (list, tuple)):
            if value and all(isinstance(item, float) for item in value):
                return f"vector({len(value)} dims)"
            if len(value) <= MAX_INLINE_ITEMS and all(
                isinstance(item, int) and not isinstance(item, bool) for item in value
            ):
                return str(value)
            return f"{type(value).__name__}({len(value)} items)"
        if isinstance(value, dict):
            return f"dict({len(value)} keys)"
        return preview(str(value), max_length)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context dict with arbitrary key-value pairs
    """
    safe_context = {
        key: safe_log_value(val) for key, val in context.items()
    }
    logger.log(level, message, extra=safe_context)
