"""
Error envelope returned by every failing request.

    {
        "error": {"code": "...", "message": "...", "details": [...], "context": {...}},
        "request_id": "...",
        "suggested_action": "..."
    }

`details` is only present for validation failures.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Machine-readable error codes, grouped by HTTP status."""

    # 400 / 422
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # 401 / 403
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    # 404 / 405
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


class FieldError(BaseModel):
    """One rejected request field."""

    field: str = Field(..., description="Dotted location, e.g. 'body.slug' or 'query.limit'")
    message: str
    code: str | None = Field(None, examples=["MISSING", "ENUM", "STRING_PATTERN_MISMATCH"])
    value: Any | None = Field(None, description="The rejected input")


class ErrorDetail(BaseModel):
    code: ErrorCode
    message: str
    details: list[FieldError] | None = None
    context: dict[str, Any] | None = Field(None, description="Extra facts, e.g. the conflicting slug")

    @classmethod
    def from_validation_error(cls, validation_errors: list[dict[str, Any]]) -> "ErrorDetail":
        """Build from `RequestValidationError.errors()`."""
        return cls(
            code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            details=[
                FieldError(
                    field=".".join(str(loc) for loc in err.get("loc", [])),
                    message=err.get("msg", "Invalid value"),
                    code=str(err.get("type", "invalid")).upper(),
                    value=err.get("input"),
                )
                for err in validation_errors
            ],
        )
