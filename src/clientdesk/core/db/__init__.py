"""Database utilities - engine, session, migrations."""

from src.clientdesk.core.db.engine import dispose_engine, get_engine
from src.clientdesk.core.db.migrations import (
    create_all,
    drop_all,
    run_migrations_async,
    run_migrations_sync,
)
from src.clientdesk.core.db.session import get_session, get_session_factory

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    "get_session_factory",
    # Migrations
    "create_all",
    "drop_all",
    "run_migrations_async",
    "run_migrations_sync",
]
