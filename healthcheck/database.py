"""Database engine and connection handle."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from healthcheck.config import settings

# Global engine; connections are opened lazily on first checkout
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    pool_timeout=settings.database_pool_timeout,
    pool_pre_ping=settings.database_pool_pre_ping,
    echo=settings.database_echo,
)


async def close_db() -> None:
    """Dispose the engine and close pooled connections."""
    await engine.dispose()


class DatabaseUnavailableError(Exception):
    """Database handle has no usable engine."""


class SQLAlchemyConnection:
    """Connection to an async engine, checked out from the pool on ping."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.connection: AsyncConnection | None = None

    async def ping(self) -> None:
        """Check out a pooled connection and run a trivial round-trip query."""
        if self.connection is None:
            self.connection = await self.engine.connect()
        await self.connection.execute(text("SELECT 1"))

    async def close(self) -> None:
        """Return the connection to the pool, if one was checked out."""
        if self.connection is not None:
            await self.connection.close()
            self.connection = None


class SQLAlchemyDatabase:
    """Database handle backed by an ``AsyncEngine``."""

    def __init__(self, engine: AsyncEngine | None):
        self.engine = engine
        self.closed = False

    async def acquire(self) -> SQLAlchemyConnection:
        """
        Get a connection bound to the engine. Performs no I/O.

        Raises:
            DatabaseUnavailableError: handle is closed or has no engine
        """
        if self.closed or self.engine is None:
            raise DatabaseUnavailableError("database handle is closed")
        return SQLAlchemyConnection(self.engine)

    def close(self) -> None:
        """Mark the handle unusable; the engine is disposed by its owner."""
        self.closed = True
