"""Scoped structlog context."""
from contextlib import contextmanager
from typing import Any, Iterator

import structlog


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """
    Attach `fields` to every log event emitted inside the block.

        with log_context(user_id=user.id):
            logger.info("AI session started", session_id=7)
    """
    structlog.contextvars.bind_contextvars(**fields)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*fields)
