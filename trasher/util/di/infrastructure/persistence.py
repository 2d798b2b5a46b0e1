"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from trasher.config import Settings
from trasher.domain.repository import (
    CommentRepository,
    DecisionRepository,
    Transaction,
)
from trasher.persistence.database import (
    SchemaInitializer,
    create_engine,
    create_session_factory,
)
from trasher.persistence.repository import (
    PostgresCommentRepository,
    PostgresDecisionRepository,
    SessionTransaction,
)
from trasher.util.di.base import ProviderBase
from trasher.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine.

        No connection is opened here. The pool is disposed when the container
        closes.
        """
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_schema_initializer(
        self, engine: AsyncEngine, settings: Settings
    ) -> SchemaInitializer:
        """Provide schema initializer.

        The decisions table is created by the first store operation that
        needs it, so a database outage surfaces as a failed operation.
        """
        return SchemaInitializer(engine, enabled=settings.database.create_schema)

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Moderation writes commit explicitly; whatever is left is committed at
        the end of the request, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, session: AsyncSession) -> Transaction:
        """Provide transaction over the request session."""
        return SessionTransaction(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_decision_repository(
        self, session: AsyncSession, schema: SchemaInitializer
    ) -> DecisionRepository:
        """Provide Decision repository."""
        return PostgresDecisionRepository(session, schema)
