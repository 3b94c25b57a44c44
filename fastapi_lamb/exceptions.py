"""Custom exception classes for the Lambda adapter."""

from typing import Any


class AdapterError(Exception):
    """Base exception for recoverable translation failures."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code used when the caller renders it
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class InvalidRequestError(AdapterError):
    """Raised when an incoming event cannot be translated (400)."""

    def __init__(
        self,
        message: str = "Invalid request",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize InvalidRequestError.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_REQUEST",
            details=details,
        )


class InvalidResponseError(AdapterError):
    """Raised when the application response cannot be translated (502)."""

    def __init__(
        self,
        message: str = "Invalid response",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize InvalidResponseError.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=502,
            error_code="INVALID_RESPONSE",
            details=details,
        )


class FatalAdapterError(RuntimeError):
    """
    Base exception for configuration and programming errors.

    These are never converted into responses: the invocation is aborted so
    the mismatch surfaces in the deployment logs.
    """


class BasePathResolutionError(FatalAdapterError):
    """Raised when the declared resource template does not fit the request path."""


class LifecycleError(FatalAdapterError):
    """Raised when the dispatch client is used out of order."""
