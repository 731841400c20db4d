"""Persistence providers.

Production wires the PostgreSQL repositories to one transaction per request.
Tests replace the whole component with in-memory repositories.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from inkwell.config import Settings
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.persistence.database import create_engine, create_session_factory
from inkwell.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
)
from inkwell.util.di.base import ProviderBase
from inkwell.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories over a request-scoped transaction."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        try:
            yield engine
        finally:
            await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open a session whose transaction spans the whole request.

        ``session.begin()`` commits when the request scope closes normally and
        rolls back when it closes with an exception, so a failed cascade
        delete leaves nothing half removed.
        """
        async with session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except Exception as e:
                logfire.warn(
                    "Request transaction rolled back",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)
