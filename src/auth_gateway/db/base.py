"""Database engine and session configuration."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from auth_gateway.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class Database:
    """Owns the async engine and session factory for one database URL."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the database handle.

        The engine is created lazily on first use.

        Args:
            settings: Application settings (uses default if not provided)
        """
        self._settings = settings or get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def url(self) -> str:
        """Get the configured database URL."""
        return self._settings.database_url

    @property
    def engine(self) -> AsyncEngine:
        """Get the database engine, creating it if necessary."""
        if self._engine is None:
            kwargs: dict[str, Any] = {"echo": self._settings.debug}
            # SQLite uses a single-connection pool that rejects sizing options
            if not self.url.startswith("sqlite"):
                kwargs["pool_size"] = self._settings.database_pool_size
                kwargs["max_overflow"] = self._settings.database_pool_max_overflow
            self._engine = create_async_engine(self.url, **kwargs)
            logger.info("Created database engine for %s", self.url.split("@")[-1])
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get the session factory, creating it if necessary."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session as a context manager.

        Commits on normal exit and rolls back if the block raises.

        Yields:
            AsyncSession instance.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def init(self) -> None:
        """Create all tables.

        This should be called on application startup.
        """
        # Import models to register them with Base
        from auth_gateway.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created/verified")

    async def close(self) -> None:
        """Dispose of the engine.

        This should be called on application shutdown.
        """
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection closed")


# Global database instance (lazily initialized)
_database: Database | None = None


def get_database() -> Database:
    """Get the global database instance.

    Returns:
        Database instance
    """
    global _database
    if _database is None:
        _database = Database()
    return _database
