"""
Exception hierarchy for the Dynamic RAG pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DynamicRagException(Exception):
    """Base exception for all Dynamic RAG errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DynamicRagException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ResponseDecodingError(DynamicRagException):
    """Raised when a collaborator response is not the expected JSON shape."""

    pass


class CollaboratorError(DynamicRagException):
    """Raised when an external service answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize collaborator error.

        Args:
            message: Error message
            status_code: HTTP status returned by the service
            body: Response body text
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        self.body = body
        super().__init__(f"{message}: {body}" if body else message, details)


class EmbeddingError(CollaboratorError):
    """Raised when the embedding endpoint rejects a batch."""

    pass


class VectorStoreError(CollaboratorError):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        body: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (create, upsert, search, delete)
            status_code: HTTP status returned by the service
            body: Response body text
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, status_code=status_code, body=body, details=details)


class CollectionExistsError(VectorStoreError):
    """Raised when a session collection name is already taken."""

    def __init__(
        self,
        collection_id: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        """
        Initialize collection collision error.

        Args:
            collection_id: Name that collided
            status_code: HTTP status returned by the service
            body: Response body text
        """
        self.collection_id = collection_id
        super().__init__(
            f"Collection already exists: {collection_id}",
            operation="create",
            status_code=status_code,
            body=body,
            details={"collection_id": collection_id},
        )


class CompletionError(CollaboratorError):
    """Raised when the chat-completion endpoint rejects a request."""

    pass
