"""
structlog setup.

Modules log through `get_logger(__name__)` with key/value context:

    logger.info("Plugin toggled", plugin_id=3, enabled=True)

`LOG_FORMAT=json` (default) renders one JSON object per line;
`LOG_FORMAT=console` renders colored text for local development.
"""
import logging
from typing import Optional

import structlog

from idp_service.api.middleware.request_id import add_request_id_to_log
from idp_service.config.secrets import mask_secrets_processor
from idp_service.config.settings import get_settings


def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        pad_event=25,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging() -> None:
    """
    Install the processor chain: bound context (`log_context`), request and
    correlation ids, level, ISO timestamp, secret masking, exception
    formatting, renderer.

    Standard-library loggers (uvicorn, sqlalchemy) get the same level.
    """
    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_request_id_to_log,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            mask_secrets_processor,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", level=settings.log_level)


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
