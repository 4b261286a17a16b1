from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_DRIVERS = ("+asyncpg", "+aiosqlite", "+psycopg")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Clientdesk"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Logging
    log_organization_ids: bool = True  # Set to False to hash org ids in log context

    # Database
    database_url: str
    database_migrations_url: str | None = None  # Sync URL override for Alembic
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False

    # Listing
    default_list_limit: int = 500
    max_list_limit: int = 1000

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Record stores only run on an async driver."""
        scheme = v.split("://", 1)[0]
        if not any(scheme.endswith(driver) for driver in ASYNC_DRIVERS):
            raise ValueError(
                f"DATABASE_URL must use an async driver ({', '.join(ASYNC_DRIVERS)}), "
                f"got '{scheme}'"
            )
        return v

    @model_validator(mode="after")
    def validate_list_limits(self) -> "Settings":
        if not 1 <= self.default_list_limit <= self.max_list_limit:
            raise ValueError("DEFAULT_LIST_LIMIT must be between 1 and MAX_LIST_LIMIT")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
