"""
Request and correlation ids.

Every request gets an `X-Request-ID` (the caller's, when it is a UUID4, else
a fresh one) and an `X-Correlation-ID` (the caller's, else the request id).
Both are echoed on the response, stored on `request.state` and attached to
every log line emitted while the request is handled.
"""
import uuid
from contextvars import ContextVar
from typing import Any, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

# Imported by the logging setup, so this module cannot use get_logger
logger = structlog.get_logger(__name__)


def is_valid_uuid(value: str) -> bool:
    """True for the canonical lower-case form of a UUID4."""
    try:
        parsed = uuid.UUID(value, version=4)
    except (ValueError, AttributeError):
        return False
    return str(parsed) == value


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def get_correlation_id() -> Optional[str]:
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    correlation_id_var.set(correlation_id)


def add_request_id_to_log(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Structlog processor adding the current ids to each event."""
    for key, var in (("request_id", request_id_var), ("correlation_id", correlation_id_var)):
        value = var.get()
        if value:
            event_dict.setdefault(key, value)
    return event_dict


def _incoming_id(request: Request, header: str) -> Optional[str]:
    value = request.headers.get(header)
    if value and not is_valid_uuid(value):
        logger.warning("Ignoring malformed id header", header=header, value=value[:64])
        return None
    return value


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = _incoming_id(request, "X-Request-ID") or str(uuid.uuid4())
        correlation_id = _incoming_id(request, "X-Correlation-ID") or request_id

        request.state.request_id = request_id
        request.state.correlation_id = correlation_id
        set_request_id(request_id)
        set_correlation_id(correlation_id)

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Correlation-ID"] = correlation_id
        return response
