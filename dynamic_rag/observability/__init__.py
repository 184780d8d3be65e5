"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from dynamic_rag.observability.log_utils import log_with_context, preview, safe_log_value
from dynamic_rag.observability.logger import ContextFormatter, configure_logging

__all__ = [
    "configure_logging",
    "ContextFormatter",
    "log_with_context",
    "preview",
    "safe_log_value",
]
