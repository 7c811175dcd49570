"""
Application errors.

Each subclass fixes the HTTP status and error code it is rendered with by
`api.middleware.errors`. Raise with a message, optional `details` (shown
as the envelope's `context`) and an optional suggested action:

    raise AlreadyExists(
        "A service with this slug already exists",
        details={"slug": "payment-api"},
    )
"""

from typing import Any, Optional

from idp_service.api.schemas.errors import ErrorCode


class AppError(Exception):
    """Base for errors that map onto an HTTP response."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500
    default_message: str = "An unexpected error occurred"
    default_suggested_action: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggested_action: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.suggested_action = suggested_action or self.default_suggested_action
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class AlreadyExists(AppError):
    """A unique key (such as a service slug) is already taken."""

    status_code = 409
    error_code = ErrorCode.DUPLICATE_RESOURCE
    default_message = "Resource already exists"
    default_suggested_action = "Choose a different slug and try again"


# External collaborators


class ExternalError(AppError):
    status_code = 502
    error_code = ErrorCode.EXTERNAL_SERVICE_ERROR
    default_message = "External service call failed"


class LLMError(ExternalError):
    """The LLM chat endpoint failed or is not configured."""

    default_message = "The AI assistant is unavailable"
    default_suggested_action = "Please try again in a moment"


class DatabaseError(ExternalError):
    """A configured database could not be reached."""

    status_code = 503
    error_code = ErrorCode.DATABASE_ERROR
    default_message = "Database is unavailable"
    default_suggested_action = "Please try again shortly"
