"""Domain exceptions for the people directory.

Defines domain-level exceptions independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class DirectoryException(Exception):
    """Base exception for all people directory errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, login).
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
        """Return a JSON-serializable error body."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ResourceNotFoundException(DirectoryException):
    """Raised when a requested resource (route, person) does not exist."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "RESOURCE_NOT_FOUND", details)


class MemberNotFoundException(ResourceNotFoundException):
    """Raised when no cross-organization member has the requested login."""

    def __init__(self, login: str) -> None:
        """Initialize with the missing login.

        Args:
            login: The login that was not found.
        """
        super().__init__(f"Person not found: {login}", {"login": login})


class ProviderException(DirectoryException):
    """Raised when the membership or link provider fails.

    Never cached: the next request retries the fetch.
    """

    def __init__(self, provider: str, message: str) -> None:
        """Initialize with provider name and failure description.

        Args:
            provider: Provider identifier (e.g. 'github', 'links-file').
            message: What went wrong.
        """
        super().__init__(
            f"{provider} provider failed: {message}",
            "PROVIDER_ERROR",
            {"provider": provider},
        )
