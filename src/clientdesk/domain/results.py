"""Result envelope and error taxonomy returned by every store operation.

Expected outcomes (bad input, missing record, stale version) are values,
never exceptions. Only infrastructure failures are reported as
`DatabaseError`, and anything else propagates.
"""

from typing import Annotated, Any, Generic, Literal, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
E = TypeVar("E")


class Success(BaseModel, Generic[T]):
    """Successful outcome carrying the operation's data."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: Literal[True] = True
    data: T


class Failure(BaseModel, Generic[E]):
    """Failed outcome carrying one of the error kinds."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: Literal[False] = False
    error: E


type Result[T, E] = Success[T] | Failure[E]


class _StoreError(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str


class ValidationError(_StoreError):
    """Input failed field constraints or a cross-field rule."""

    type: Literal["ValidationError"] = "ValidationError"
    fields: dict[str, str] = Field(default_factory=dict)


class NotFoundError(_StoreError):
    """No such record in the caller's organization.

    Records of other organizations produce exactly the same error.
    """

    type: Literal["NotFoundError"] = "NotFoundError"


class ConflictError(_StoreError):
    """Optimistic-lock version mismatch."""

    type: Literal["ConflictError"] = "ConflictError"


class InvalidStateError(_StoreError):
    """Operation not allowed in the record's current state."""

    type: Literal["InvalidStateError"] = "InvalidStateError"


class DatabaseError(_StoreError):
    """Storage failure. The message never carries driver details."""

    type: Literal["DatabaseError"] = "DatabaseError"


ErrorKind = Annotated[
    ValidationError | NotFoundError | ConflictError | InvalidStateError | DatabaseError,
    Field(discriminator="type"),
]


def ok[D](data: D) -> Success[D]:
    return Success(data=data)


def fail[Err](error: Err) -> Failure[Err]:
    return Failure(error=error)


def not_found(entity: str) -> NotFoundError:
    return NotFoundError(message=f"{entity} not found")


def conflict(entity: str) -> ConflictError:
    return ConflictError(
        message=(
            f"{entity} was modified by another user since it was read. "
            "Please refresh and try again."
        )
    )


def database_error() -> DatabaseError:
    return DatabaseError(message="A database error occurred")


def _field_key(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def validation_error_from(
    exc: pydantic.ValidationError, message: str = "Invalid input data"
) -> ValidationError:
    """Collapse pydantic errors into a field -> message map (first error wins)."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        fields.setdefault(_field_key(error["loc"]), error["msg"])
    return ValidationError(message=message, fields=fields)
