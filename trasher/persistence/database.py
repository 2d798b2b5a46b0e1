"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from trasher.config import Settings
from trasher.persistence.tables import trasher_table


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create the decisions table if it does not exist yet.

    Safe to run on every startup. The comments table is never touched.

    Args:
        engine: Database engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(
            lambda sync_conn: trasher_table.create(sync_conn, checkfirst=True)
        )
    logfire.info("Decision table ensured", table=trasher_table.name)


class SchemaInitializer:
    """Runs ``ensure_schema`` once per process, on first use.

    Creating the table lazily keeps connection failures inside the store
    operation that needs the table, where they are reported like any other
    store failure. A failed attempt is retried by the next caller.
    """

    def __init__(self, engine: AsyncEngine, enabled: bool = True) -> None:
        """Initialize schema initializer.

        Args:
            engine: Database engine
            enabled: Whether the table should be created at all
        """
        self.engine = engine
        self.enabled = enabled
        self.ready = not enabled

    async def ensure(self) -> None:
        """Create the decisions table unless that already happened."""
        if self.ready:
            return
        await ensure_schema(self.engine)
        self.ready = True
