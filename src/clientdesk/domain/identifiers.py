"""Opaque identifier types.

Each id is its own frozen type. A `ClientId` and a `ProjectId` built from
the same UUID never compare equal and neither is accepted where the other
is expected, so ids cannot be swapped at a call site.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Self
from uuid import UUID, uuid4

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class _Identifier(ABC):
    """Pydantic integration shared by all identifier types."""

    @classmethod
    @abstractmethod
    def parse(cls, raw: Any) -> Self:
        """Build the id from its raw form, raising ValueError if malformed."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: type[Any], handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.to_string_ser_schema(),
        )


@dataclass(frozen=True)
class OrganizationId(_Identifier):
    """Tenant identifier, resolved and trusted by the calling layer."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Organization id must be a non-empty string")

    @classmethod
    def parse(cls, raw: Any) -> Self:
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, _Identifier):
            raise ValueError(f"Cannot use {type(raw).__name__} as {cls.__name__}")
        return cls(raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class _UUIDIdentifier(_Identifier):
    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{type(self).__name__} wraps a UUID, got {type(self.value).__name__}")

    @classmethod
    def parse(cls, raw: Any) -> Self:
        """Build the id from a UUID or its text form.

        Raises:
            ValueError: If the text is not a UUID, or the value is another
                identifier type or not text at all
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, _Identifier):
            raise ValueError(f"Cannot use {type(raw).__name__} as {cls.__name__}")
        if isinstance(raw, UUID):
            return cls(raw)
        if isinstance(raw, str):
            try:
                return cls(UUID(raw))
            except ValueError as e:
                raise ValueError(f"Invalid {cls.__name__}: {raw!r}") from e
        raise ValueError(f"Cannot build {cls.__name__} from {type(raw).__name__}")

    @classmethod
    def new(cls) -> Self:
        """Generate a fresh random id."""
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ClientId(_UUIDIdentifier):
    pass


@dataclass(frozen=True)
class ProjectId(_UUIDIdentifier):
    pass
