"""Shared unit-of-work and error translation for the record stores."""

import functools
from collections.abc import AsyncGenerator, Awaitable, Callable, Mapping
from contextlib import asynccontextmanager
from typing import Any, Concatenate

import pydantic
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.clientdesk.core.config import Settings, get_settings
from src.clientdesk.core.db.session import get_session_factory
from src.clientdesk.core.logging import get_logger, organization_log_value
from src.clientdesk.domain.identifiers import OrganizationId
from src.clientdesk.domain.results import (
    DatabaseError,
    Failure,
    ValidationError,
    database_error,
    fail,
    validation_error_from,
)

logger = get_logger(__name__)


class BaseService:
    """Base for record-store services.

    Each public operation is one unit of work: a single transaction opened
    from the injected session factory, committed when the operation
    returns and rolled back if it raises.
    """

    entity: str

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        settings: Settings | None = None,
    ):
        self.session_factory = session_factory or get_session_factory()
        self.settings = settings or get_settings()

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        async with self.session_factory.begin() as session:
            yield session

    def list_limit(self, requested: int | None) -> int:
        """Rows a single listing may return."""
        return min(requested or self.settings.default_list_limit, self.settings.max_list_limit)

    def log_context(self, organization_id: OrganizationId) -> dict[str, str]:
        return {"organization_id": organization_log_value(organization_id.value)}


def parse_input[M: pydantic.BaseModel](
    schema: type[M], data: M | Mapping[str, Any] | None
) -> M | ValidationError:
    """Validate caller input before any storage access."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data if data is not None else {})
    except pydantic.ValidationError as e:
        return validation_error_from(e)


def check_expected_version(expected_version: Any) -> ValidationError | None:
    if (
        isinstance(expected_version, bool)
        or not isinstance(expected_version, int)
        or expected_version < 1
    ):
        return ValidationError(
            message="Invalid input data",
            fields={"expected_version": "Expected version must be a positive integer"},
        )
    return None


def translate_database_errors[S: BaseService, **P, R](
    event: str,
) -> Callable[
    [Callable[Concatenate[S, P], Awaitable[R]]],
    Callable[Concatenate[S, P], Awaitable[R | Failure[DatabaseError]]],
]:
    """Turn storage failures inside an operation into a DatabaseError result.

    The transaction has already been rolled back by the time the error
    reaches here. Driver details are logged, never returned.
    """

    def decorator(
        func: Callable[Concatenate[S, P], Awaitable[R]],
    ) -> Callable[Concatenate[S, P], Awaitable[R | Failure[DatabaseError]]]:
        @functools.wraps(func)
        async def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> R | Failure[DatabaseError]:
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError:
                logger.exception(event, entity=self.entity)
                return fail(database_error())

        return wrapper

    return decorator
