"""
Exception handlers rendering every failure in one envelope.

    AppError              -> its own status, code and suggested action
    HTTPException         -> status kept, code looked up by status, headers
                             passed through (WWW-Authenticate on 401)
    RequestValidationError -> 422 VALIDATION_ERROR with per-field details
    anything else         -> 500 INTERNAL_ERROR

In production 5xx messages are replaced with a generic text and their
context dropped.
"""

import uuid
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from idp_service.api.schemas.errors import ErrorCode, ErrorDetail, FieldError
from idp_service.config.settings import get_settings
from idp_service.domain.exceptions import AppError
from idp_service.infrastructure.observability.logging import get_logger


logger = get_logger(__name__)

GENERIC_SERVER_MESSAGE = "An internal error occurred. Please try again later."

_CODES_BY_STATUS: dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    409: ErrorCode.CONFLICT,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}


def _request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
    return request_id or str(uuid.uuid4())


def _log_failure(request: Request, exc: Exception, status_code: int, request_id: str) -> None:
    fields: dict[str, Any] = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "error_type": type(exc).__name__,
        "error": str(exc),
    }
    user = getattr(request.state, "user", None)
    if user is not None:
        fields["user_id"] = user.id

    if status_code >= 500:
        logger.error("Server error", exc_info=exc, **fields)
    elif status_code in (401, 403):
        logger.warning("Authentication error", **fields)
    else:
        logger.info("Client error", **fields)


def _envelope(
    request_id: str,
    status_code: int,
    code: ErrorCode,
    message: str,
    *,
    details: Optional[list[FieldError]] = None,
    context: Optional[dict[str, Any]] = None,
    suggested_action: Optional[str] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    if status_code >= 500 and get_settings().is_production:
        message, context = GENERIC_SERVER_MESSAGE, None

    content: dict[str, Any] = {
        "error": ErrorDetail(code=code, message=message, details=details, context=context or None)
        .model_dump(mode="json", exclude_none=True),
        "request_id": request_id,
    }
    if suggested_action:
        content["suggested_action"] = suggested_action

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    request_id = _request_id(request)
    _log_failure(request, exc, exc.status_code, request_id)
    return _envelope(
        request_id,
        exc.status_code,
        exc.error_code,
        exc.message,
        context=exc.details,
        suggested_action=exc.suggested_action,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    request_id = _request_id(request)
    _log_failure(request, exc, exc.status_code, request_id)
    return _envelope(
        request_id,
        exc.status_code,
        _CODES_BY_STATUS.get(exc.status_code, ErrorCode.INTERNAL_ERROR),
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    request_id = _request_id(request)
    detail = ErrorDetail.from_validation_error(exc.errors())
    logger.info(
        "Validation error",
        request_id=request_id,
        path=request.url.path,
        fields=[f.field for f in detail.details or []],
    )
    return _envelope(
        request_id,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR,
        detail.message,
        details=detail.details,
        suggested_action="Check the highlighted fields and try again",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = _request_id(request)
    _log_failure(request, exc, 500, request_id)
    return _envelope(
        request_id,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
        f"An unexpected error occurred: {exc}",
        context={"exception_type": type(exc).__name__},
        suggested_action="Please try again later. If the problem persists, contact the platform team",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers above on `app`."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
