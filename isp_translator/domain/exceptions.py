"""Domain exceptions for the ISP translator.

Defines the error taxonomy of the translation path. These exceptions are
independent of transport concerns; the presentation layer maps them to
HTTP responses in exception handlers.

Only failures on the synchronous path (validation, store read, provider
call) ever reach a caller. StoreWriteError and EdgeWriteError belong to
the detached write-back path and are absorbed and logged there.
"""

from typing import Any


class TranslatorException(Exception):
    """Base exception for all translator errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, cache_key).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the HTTP layer."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TranslatorException):
    """Raised when input is missing, empty or oversized (client fault, not retried)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UpstreamTransformError(TranslatorException):
    """Raised when the transformation provider fails (surfaced, never retried here)."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        """Initialize with the failure reason.

        Args:
            reason: What went wrong (transport error, bad status, bad payload).
            status_code: Provider HTTP status when one was received.
        """
        details: dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__("Translation provider error", "UPSTREAM_TRANSFORM_ERROR", details)


class StoreReadError(TranslatorException):
    """Raised when the persistent store cannot be read (retryable infrastructure error)."""

    def __init__(self, cache_key: str, reason: str) -> None:
        super().__init__(
            "Translation store unavailable",
            "STORE_READ_ERROR",
            {"cache_key": cache_key, "reason": reason},
        )


class StoreWriteError(TranslatorException):
    """Raised when a write-back insert fails. Absorbed by the background runner."""

    def __init__(self, cache_key: str, reason: str, *, duplicate: bool = False) -> None:
        """Initialize with key and reason.

        Args:
            cache_key: Key whose row failed to materialize.
            reason: Driver or constraint message.
            duplicate: True when a concurrent writer already inserted the key.
        """
        super().__init__(
            f"Failed to store translation: {cache_key}",
            "STORE_WRITE_ERROR",
            {"cache_key": cache_key, "reason": reason, "duplicate": duplicate},
        )
        self.duplicate = duplicate


class EdgeWriteError(TranslatorException):
    """Raised inside a write-back job when the edge cache did not accept a value."""

    def __init__(self, cache_key: str) -> None:
        super().__init__(
            f"Edge cache store not achieved: {cache_key}",
            "EDGE_WRITE_ERROR",
            {"cache_key": cache_key},
        )


class UnauthorizedException(TranslatorException):
    """Raised when the Authorization header is missing or does not match API_TOKEN."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(TranslatorException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'translation').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
