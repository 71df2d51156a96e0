"""Domain exceptions for the side-by-side comparison core.

Defines exceptions for construction-time rule violations and for failed
result fetches. A formatter that cannot produce a result list is not an
error: it returns None instead of raising.
"""

from typing import Any


class SideBySideException(Exception):
    """Base exception for all side-by-side errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, url).
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


class ValidationException(SideBySideException):
    """Raised when a value object or entity is constructed with invalid input."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvariantViolationException(SideBySideException):
    """Raised when a URI that is always well-formed by construction fails to parse.

    Signals a programming error, not a recoverable condition.
    """

    def __init__(self, message: str, uri: str) -> None:
        super().__init__(message, "INVARIANT_VIOLATION", {"uri": uri})


class SearchTransportException(SideBySideException):
    """Raised when the request to a search backend or reading its response fails."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize with the requested URL and failure reason.

        Args:
            url: The backend URL that was requested.
            reason: Human-readable reason (e.g. 'connection refused', 'HTTP 503').
        """
        super().__init__(
            f"Search request failed: {reason}",
            "SEARCH_TRANSPORT_ERROR",
            {"url": url, "reason": reason},
        )


class MalformedResponseException(SideBySideException):
    """Raised when a backend response cannot be turned into a result list.

    Covers invalid XML, a result without a URL, an unparseable URL, and a
    non-numeric indent attribute. The whole fetch fails; no partial list
    is returned.
    """

    def __init__(self, reason: str, **details_extra: Any) -> None:
        """Initialize with reason and optional context.

        Args:
            reason: Human-readable reason (e.g. 'result has no URL').
            **details_extra: Optional keys merged into details (e.g. position, value).
        """
        super().__init__(
            f"Malformed search response: {reason}",
            "MALFORMED_RESPONSE",
            {"reason": reason, **details_extra},
        )
