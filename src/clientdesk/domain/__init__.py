"""Domain primitives shared by schemas, repositories and services."""

from src.clientdesk.domain.identifiers import ClientId, OrganizationId, ProjectId
from src.clientdesk.domain.results import (
    ConflictError,
    DatabaseError,
    ErrorKind,
    Failure,
    InvalidStateError,
    NotFoundError,
    Result,
    Success,
    ValidationError,
    fail,
    ok,
    validation_error_from,
)

__all__ = [
    # Identifiers
    "ClientId",
    "OrganizationId",
    "ProjectId",
    # Results
    "Failure",
    "Result",
    "Success",
    "fail",
    "ok",
    # Errors
    "ConflictError",
    "DatabaseError",
    "ErrorKind",
    "InvalidStateError",
    "NotFoundError",
    "ValidationError",
    "validation_error_from",
]
