"""Errors raised by the search domain and its collaborators.

Each carries a machine-readable error_code; app.core.exception_handlers turns
that code into an HTTP status and renders to_dict() as the response body.
"""

from typing import Any


class MarketplaceException(Exception):
    """Root of the service's error hierarchy.

    Attributes:
        message: Text shown to the client.
        error_code: Stable code used for the HTTP mapping (class name if omitted).
        details: Extra context such as the offending field.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_code, "message": self.message, "details": self.details}


class ValidationException(MarketplaceException):
    """A search parameter is blank, too long or out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else None)


class AuthenticationException(MarketplaceException):
    """No bearer token, or one that failed verification."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(MarketplaceException):
    """Caller is authenticated but lacks the role for the action."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        details = {
            key: value
            for key, value in (("resource", resource), ("action", action))
            if value
        }
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        super().__init__(message, "PERMISSION_DENIED", details)


class SqlNotConfiguredException(MarketplaceException):
    """DATABASE_URL is unset, so neither catalog nor dictionary can be read."""

    def __init__(self) -> None:
        super().__init__(
            "This operation requires a SQL database that is not configured.",
            "SERVICE_UNAVAILABLE",
        )


class DictionaryRebuildException(MarketplaceException):
    """Writing the new dictionary failed for a reason other than a duplicate word."""

    def __init__(self, reason: str, words_attempted: int) -> None:
        super().__init__(
            "Failed to write search dictionary",
            "DICTIONARY_REBUILD_ERROR",
            {"reason": reason, "words_attempted": words_attempted},
        )
