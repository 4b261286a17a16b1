import os
from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from sqlmodel import SQLModel

from alembic import context
from src.clientdesk.core.config import get_settings

# Import all models for metadata
from src.clientdesk.models import Client, Project  # noqa: F401

config = context.config

if config.config_file_name is not None and os.path.exists(config.config_file_name):
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata

ASYNC_DRIVER_SUFFIXES = ("+asyncpg", "+aiosqlite")


def get_database_url() -> str:
    """Get database URL for migrations.

    Precedence: URL passed by run_migrations_sync(), DATABASE_MIGRATIONS_URL,
    then DATABASE_URL.
    """
    override = config.attributes.get("database_url")
    if override:
        return override
    settings = get_settings()
    return settings.database_migrations_url or settings.database_url


def get_url() -> str:
    """Get sync database URL (strip async driver, e.g. asyncpg -> psycopg2)."""
    url = get_database_url()
    for suffix in ASYNC_DRIVER_SUFFIXES:
        url = url.replace(suffix, "")
    return url


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode with sync engine."""
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        do_run_migrations(connection)

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
