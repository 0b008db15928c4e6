"""
Database Session Factory
Creates async SQLAlchemy sessions with proper configuration
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from nexus_kernel.config import Settings
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class DatabaseSessionFactory:
    """
    Factory for creating async database sessions.

    Owns the async engine and session maker. The session maker is what the
    transaction manager and repositories receive.
    """

    def __init__(self, database_url: str, echo: bool = False, pool_size: int = 5) -> None:
        """
        Initialize session factory with database connection.

        Args:
            database_url: Async SQLAlchemy URL (postgresql+asyncpg / sqlite+aiosqlite)
            echo: Whether to log SQL statements (debug mode)
            pool_size: Connection pool size (ignored for SQLite)
        """
        self.database_url = database_url
        self.echo = echo

        engine_kwargs: dict[str, Any] = {"echo": echo}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(pool_size=pool_size, pool_pre_ping=True, pool_recycle=3600)

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Aggregates outlive the session that loaded them
            autoflush=False,
        )

        logger.info("Database session factory initialized", dialect=self.engine.dialect.name)

    @classmethod
    def from_settings(cls, settings: Settings) -> DatabaseSessionFactory:
        return cls(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.database_pool_size,
        )

    def create_session(self) -> AsyncSession:
        """
        Create a new async session.

        Returns:
            New AsyncSession instance
        """
        return self.session_factory()

    async def dispose(self) -> None:
        """Close all connections and dispose of the engine."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
