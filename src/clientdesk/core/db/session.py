"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.clientdesk.core.db.engine import get_engine


def get_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker[AsyncSession]:
    """Build the session factory the record stores open their units of work from.

    Args:
        engine: Optional engine override for testing.
    """
    if engine is None:
        engine = get_engine()
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Create a standalone database session.

    The session does not auto-commit; callers own the transaction.
    """
    session_factory = get_session_factory(engine)
    async with session_factory() as session:
        yield session
