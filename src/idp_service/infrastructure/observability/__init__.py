"""Observability: structured logging and log context."""

from idp_service.infrastructure.observability.logging import configure_logging, get_logger
from idp_service.infrastructure.observability.context import log_context

__all__ = [
    "configure_logging",
    "get_logger",
    "log_context",
]
