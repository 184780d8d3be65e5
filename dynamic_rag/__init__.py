"""
Dynamic RAG.

Chunks mixed prose/code documents, embeds them in batches, loads them into an
ephemeral per-session vector collection and answers questions against it.
"""

__version__ = "0.1.0"
