"""Client schemas for store input and output."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.clientdesk.core.validators import strip_optional, strip_required
from src.clientdesk.domain.identifiers import ClientId, OrganizationId


class ClientCreate(BaseModel):
    """Schema for creating a client."""

    model_config = ConfigDict(extra="forbid")

    company_name: str = Field(min_length=1, max_length=200)
    contact_person: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=50)
    address: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("company_name")
    @classmethod
    def validate_company_name(cls, v: str) -> str:
        return strip_required(v, "Company name")

    @field_validator("contact_person")
    @classmethod
    def validate_contact_person(cls, v: str) -> str:
        return strip_required(v, "Contact person")

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return strip_required(v, "Phone")

    @field_validator("address", "notes")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ClientUpdate(BaseModel):
    """Schema for a partial client update.

    Only fields present in the payload are applied. `address` and `notes`
    may be cleared with an explicit null; the other fields may not.
    """

    model_config = ConfigDict(extra="forbid")

    company_name: str | None = Field(default=None, min_length=1, max_length=200)
    contact_person: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    address: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("company_name")
    @classmethod
    def validate_company_name(cls, v: str | None) -> str:
        return strip_required(v, "Company name")

    @field_validator("contact_person")
    @classmethod
    def validate_contact_person(cls, v: str | None) -> str:
        return strip_required(v, "Contact person")

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str | None) -> str:
        return strip_required(v, "Phone")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Email cannot be null")
        return v

    @field_validator("address", "notes")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)

    def changes(self) -> dict:
        """Fields explicitly provided by the caller."""
        return self.model_dump(exclude_unset=True)


class ClientFilters(BaseModel):
    """Filters for listing clients. Absent filters impose no constraint."""

    model_config = ConfigDict(extra="forbid")

    search: str | None = Field(default=None, max_length=200)
    include_deleted: bool = False
    limit: int | None = Field(default=None, ge=1)

    @field_validator("search")
    @classmethod
    def validate_search(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ClientRead(BaseModel):
    """Schema for reading a client."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: ClientId
    organization_id: OrganizationId
    company_name: str
    contact_person: str
    email: str
    phone: str
    address: str | None
    notes: str | None
    version: int
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
