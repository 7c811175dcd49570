"""
Live-store selection for the data access layer.

Accessors call `has_store()` before touching the database. When it is False
reads are served from `mock_data` and writes are skipped with a warning.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from idp_service.domain.exceptions import DatabaseError
from idp_service.infrastructure.database import db
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


def has_store() -> bool:
    """True when a database was connected at startup."""
    return db.is_connected


@asynccontextmanager
async def store_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session on the configured database.

    A lost or refused connection surfaces as DatabaseError (503); constraint
    violations propagate unchanged for the caller to translate.
    """
    try:
        async with db.session() as session:
            yield session
    except OperationalError as e:
        logger.error("Database unavailable", error=str(e.orig))
        raise DatabaseError(details={"reason": type(e.orig).__name__}) from e


def skip_write(operation: str, **context) -> None:
    """Record a write that was dropped because no database is configured."""
    logger.warning("Database not configured, skipping write", operation=operation, **context)


def serve_mock(operation: str, **context) -> None:
    logger.debug("Serving mock data", operation=operation, **context)
