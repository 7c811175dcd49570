"""
Request logging middleware with structured logging.

Logs method, path, status code and duration for every request except the
health probes, and adds timing headers to the response.
"""
import time
from typing import Set
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from idp_service.infrastructure.observability.logging import get_logger


logger = get_logger(__name__)


# Health check paths to skip logging (reduce noise)
HEALTH_CHECK_PATHS: Set[str] = {
    "/health",
    "/health/live",
    "/health/ready",
}


def get_user_context_from_request(request: Request) -> dict:
    """Extract user context set on request.state by the auth dependencies."""
    context = {}

    user = getattr(request.state, "user", None)
    if user is not None:
        context["user_id"] = str(user.id)
        if getattr(user, "email", None):
            context["email"] = user.email

    return context


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.time()

        if request.url.path in HEALTH_CHECK_PATHS:
            return await call_next(request)

        log_context = {
            "method": request.method,
            "path": request.url.path,
            "query_params": str(request.query_params) if request.query_params else None,
            "client_ip": request.client.host if request.client else None,
        }

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                "Request failed with exception",
                **log_context,
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            raise

        duration = time.time() - start_time
        duration_ms = round(duration * 1000, 2)

        response_context = {
            **log_context,
            **get_user_context_from_request(request),
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }

        if response.status_code >= 500:
            logger.error("Request completed with error", **response_context)
        elif response.status_code >= 400:
            logger.warning("Request rejected", **response_context)
        else:
            logger.info("Request completed", **response_context)

        response.headers["X-Process-Time-Ms"] = str(duration_ms)

        return response
