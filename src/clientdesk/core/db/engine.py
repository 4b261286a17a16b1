"""Database engine management."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.clientdesk.core.config import get_settings

_engine: AsyncEngine | None = None


def _engine_kwargs(url: str) -> dict[str, Any]:
    """Pool options for the configured dialect (SQLite has no sized pool)."""
    settings = get_settings()
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            **_engine_kwargs(settings.database_url),
        )
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
