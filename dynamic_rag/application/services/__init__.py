"""
Application services.
"""

from dynamic_rag.application.services.rag_session_service import RagSessionService

__all__ = ["RagSessionService"]
