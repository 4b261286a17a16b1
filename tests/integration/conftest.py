"""Integration test fixtures for PostgreSQL.

These fixtures require an external PostgreSQL database, given by
TEST_POSTGRES_URL (postgresql+asyncpg://...). Every test in this
directory is skipped when it is unset.
"""

import os
from collections.abc import AsyncGenerator
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from src.clientdesk.core.db import get_session_factory, run_migrations_async
from src.clientdesk.domain import OrganizationId
from tests.utils.cleanup import cleanup_organization

TEST_POSTGRES_URL = os.environ.get("TEST_POSTGRES_URL")


def pytest_collection_modifyitems(config, items):
    skip = pytest.mark.skip(reason="TEST_POSTGRES_URL is not set")
    for item in items:
        if "integration" in item.keywords and not TEST_POSTGRES_URL:
            item.add_marker(skip)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """PostgreSQL engine with migrations applied."""
    await run_migrations_async(TEST_POSTGRES_URL)

    test_engine = create_async_engine(TEST_POSTGRES_URL, poolclass=NullPool)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return get_session_factory(engine)


@pytest.fixture
async def org(engine: AsyncEngine) -> AsyncGenerator[OrganizationId]:
    """Fresh organization per test; its rows are removed afterwards."""
    organization_id = OrganizationId(f"org_{uuid4().hex[:12]}")
    yield organization_id

    async with engine.connect() as conn:
        await cleanup_organization(conn, organization_id.value)
        await conn.commit()


@pytest.fixture
async def other_org(engine: AsyncEngine) -> AsyncGenerator[OrganizationId]:
    organization_id = OrganizationId(f"org_{uuid4().hex[:12]}")
    yield organization_id

    async with engine.connect() as conn:
        await cleanup_organization(conn, organization_id.value)
        await conn.commit()
