"""
Process-wide async database handle.

The API is usable without a database: when `DATABASE_URL` is unset the
lifespan never calls `connect()`, `db.is_connected` stays False and the
data access layer falls back to the built-in mock dataset.
"""
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """
    Owns the engine and session factory.

    Usage:
        await db.connect("postgresql+asyncpg://...", pool_size=5)
        async with db.session() as session:
            ...
        await db.disconnect()
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker[AsyncSession]] = None
        self._pool_settings: Dict[str, int] = {}

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    async def connect(
        self,
        url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo_sql: bool = False,
    ) -> None:
        """
        Create the engine.

        Pool sizing applies to server databases only; SQLite (local demos)
        keeps the driver's default pool.

        Raises:
            RuntimeError: If already connected
        """
        if self.is_connected:
            raise RuntimeError("Database already connected")

        kwargs: Dict[str, Any] = {"echo": echo_sql, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            self._pool_settings = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_timeout": pool_timeout,
                "pool_recycle": pool_recycle,
            }
            kwargs.update(self._pool_settings)

        self.bind(create_async_engine(url, **kwargs))
        logger.info("Database connected", dialect=self._engine.dialect.name, **self._pool_settings)

    def bind(self, engine: AsyncEngine) -> None:
        """Use an existing engine (tests share one in-memory SQLite engine this way)."""
        self._engine = engine
        self._sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    def unbind(self) -> None:
        """Drop the engine reference without disposing it."""
        self._engine = None
        self._sessions = None

    async def disconnect(self) -> None:
        """Dispose the engine; a no-op when not connected."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self.unbind()
        logger.info("Database disconnected")

    async def create_tables(self) -> None:
        """CREATE every portal table. Deployed databases use Alembic instead."""
        if self._engine is None:
            raise RuntimeError("Database not connected")

        import idp_service.infrastructure.database.models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Unit of work: commits on normal exit, rolls back and re-raises on error.

        Raises:
            RuntimeError: If not connected
        """
        if self._sessions is None:
            raise RuntimeError("Database not connected")

        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def get_pool_stats(self) -> Dict[str, Any]:
        """Configured pool limits plus live checkout counts where the pool reports them."""
        if self._engine is None:
            raise RuntimeError("Database not connected")

        pool = self._engine.pool
        stats: Dict[str, Any] = dict(self._pool_settings)
        for name in ("checkedin", "checkedout", "overflow"):
            counter = getattr(pool, name, None)
            if callable(counter):
                stats[name] = counter()
        return stats

    async def ping(self) -> None:
        """Run SELECT 1; raises whatever the driver raises."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))


db = DatabaseManager()
