"""Reusable migration runner for both production and tests."""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from alembic import command
from alembic.config import Config

# Registers the tables on SQLModel.metadata
from src.clientdesk import models  # noqa: F401


def run_migrations_sync(url: str | None = None) -> None:
    """Run Alembic migrations synchronously.

    Args:
        url: Optional sync database URL overriding the configured one.
    """
    alembic_cfg = Config("alembic.ini")
    if url:
        alembic_cfg.attributes["database_url"] = url
    command.upgrade(alembic_cfg, "head")


async def run_migrations_async(url: str | None = None) -> None:
    """Run Alembic migrations from async context.

    Alembic's env.py drives its own sync engine, so it runs in a worker thread.
    """
    await asyncio.to_thread(run_migrations_sync, url)


async def create_all(engine: AsyncEngine) -> None:
    """Create every table from model metadata (tests and local tooling)."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop every table known to model metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
