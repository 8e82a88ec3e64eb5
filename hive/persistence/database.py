"""Async engine and unit-of-work sessions for PostgreSQL."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hive.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine.

    Connections run with the UTC time zone so server-side `now()` defaults
    agree with the timezone-aware timestamps the domain produces.

    Args:
        database: Connection settings
        echo: Log every statement (debug mode)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={
            "server_settings": {"application_name": "hive-api", "timezone": "UTC"}
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; repositories flush explicitly where they need ids."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Open a session whose writes commit together.

    Committed when the block exits cleanly, rolled back if an exception
    escapes it.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn(
                "Unit of work rolled back",
                error=str(e),
                error_type=type(e).__name__,
            )
            await session.rollback()
            raise
        await session.commit()
