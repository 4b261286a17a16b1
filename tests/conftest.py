"""Root test fixtures shared across all test types.

Store tests run against an in-memory SQLite database through aiosqlite.
PostgreSQL-only fixtures are in tests/integration/conftest.py.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator

import pytest
import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from structlog.testing import CapturingLogger

from src.clientdesk.core.config import Settings, get_settings
from src.clientdesk.core.db import create_all, get_session_factory
from src.clientdesk.core.logging import clear_request_context
from src.clientdesk.domain import OrganizationId
from src.clientdesk.services import ClientService, ProjectService

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Database Fixtures ---


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables, shared by every session of a test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_all(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return get_session_factory(engine)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Session for seeding and inspecting rows directly.

    Does not auto-commit; tests call `await db_session.commit()` after seeding.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def client_service(session_factory, settings) -> ClientService:
    return ClientService(session_factory, settings)


@pytest.fixture
def project_service(session_factory, settings) -> ProjectService:
    return ProjectService(session_factory, settings)


# --- Tenant Fixtures ---


@pytest.fixture
def org() -> OrganizationId:
    return OrganizationId("org_1")


@pytest.fixture
def other_org() -> OrganizationId:
    return OrganizationId("org_2")


@pytest.fixture
def acme_input() -> dict:
    return {
        "company_name": "Acme",
        "contact_person": "John",
        "email": "j@acme.com",
        "phone": "+1",
    }


# --- Logging Fixtures ---


@pytest.fixture
def capturing_logger():
    """Route structlog output to a CapturingLogger for the duration of a test."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)
