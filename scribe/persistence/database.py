"""Async engine and session factory for PostgreSQL (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from scribe.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine sized from ``settings.database``; echoes SQL in debug mode."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": "scribe-api"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit and never autoflush.

    Repositories issue Core statements only, so nothing is pending between
    calls anyway.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
