"""API error schemas. Entity request/response schemas live in api.schemas.portal."""

from idp_service.api.schemas.errors import (
    ErrorCode,
    ErrorDetail,
    FieldError,
)

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "FieldError",
]
