"""
Sales-Coach error types.

Every error carries a human-readable message plus a details dict that
ends up in logs and, for 500 responses, in the "message" field.

    SalesCoachException
    ├── ConfigurationError        missing credential or setting (fatal, 500)
    ├── ValidationError           bad client input (400)
    │   └── EmptyConversationError
    └── ProviderError             external call failed (500, never retried)
        ├── EmbeddingError
        ├── VectorStoreError
        └── GenerationError

Dependencies: None (pure domain layer)
System role: Shared error vocabulary for core, boundary and API layers
"""

from typing import Any


def _with_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value})
    return merged


class SalesCoachException(Exception):
    """Root of all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ConfigurationError(SalesCoachException):
    """A required setting or credential is absent or invalid."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: What is wrong
            setting: Environment variable to fix (e.g. LLM_API_KEY)
            details: Extra context
        """
        super().__init__(message, _with_context(details, setting=setting))


class ValidationError(SalesCoachException):
    """Client input was rejected before any provider was called."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _with_context(details, field=field))


class EmptyConversationError(ValidationError):
    """A conversation-based operation received no usable messages."""

    def __init__(self, message: str = "有効な会話データが必要です") -> None:
        super().__init__(message, field="conversation")


class ProviderError(SalesCoachException):
    """
    An embedding, vector store, model or remote API call failed.

    The provider's own message is used as the error message, and its
    error code (when it gives one) is kept on .code.
    """

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.provider = provider
        self.code = code
        super().__init__(message, _with_context(details, provider=provider, code=code))


class EmbeddingError(ProviderError):
    """Embedding call failed or returned vectors of the wrong shape."""

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, provider="embedding", code=code, details=details)


class VectorStoreError(ProviderError):
    """Vector store upsert or query failed."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.operation = operation
        super().__init__(
            message,
            provider="vector_store",
            code=code,
            details=_with_context(details, operation=operation),
        )


class GenerationError(ProviderError):
    """Chat model call failed."""

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, provider="llm", code=code, details=details)
