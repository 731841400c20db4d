"""Async engine and session factory for the comment store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inkwell.config import Settings

APPLICATION_NAME = "inkwell-comments"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine.

    Queries are bounded by a server-side ``statement_timeout`` so a slow
    moderation query cannot hold a pooled connection forever.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_recycle=db.pool_recycle_seconds,
        connect_args={
            "server_settings": {
                "application_name": APPLICATION_NAME,
                "statement_timeout": str(db.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Returned models are pydantic copies, nothing reads ORM state after commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
