"""Project schemas for store input and output."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.clientdesk.core.validators import reject_null, strip_optional, strip_required
from src.clientdesk.domain.identifiers import ClientId, OrganizationId, ProjectId
from src.clientdesk.models.enums import ProjectStatus

END_BEFORE_START_MESSAGE = "End date must be greater than or equal to start date"


def check_date_range(start_date: date | None, end_date: date | None) -> None:
    """Raise if both dates are known and the range is inverted."""
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValueError(END_BEFORE_START_MESSAGE)


class ProjectCreate(BaseModel):
    """Schema for creating a project. Status defaults to Planning."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    client_id: ClientId | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: date
    end_date: date | None = None
    budget: int | None = Field(default=None, gt=0)
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return strip_required(v, "Project name")

    @field_validator("description", "notes")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("end_date")
    @classmethod
    def validate_end_date(cls, v: date | None, info: ValidationInfo) -> date | None:
        check_date_range(info.data.get("start_date"), v)
        return v


class ProjectUpdate(BaseModel):
    """Schema for a partial project update.

    Only fields present in the payload are applied. The date range is
    checked here when both dates are present; the store re-checks it
    against the stored row otherwise.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    client_id: ClientId | None = None
    status: ProjectStatus | None = None
    start_date: date | None = None
    end_date: date | None = None
    budget: int | None = Field(default=None, gt=0)
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        return strip_required(v, "Project name")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: ProjectStatus | None) -> ProjectStatus:
        return reject_null(v, "Status")

    @field_validator("start_date")
    @classmethod
    def validate_start_date(cls, v: date | None) -> date:
        return reject_null(v, "Start date")

    @field_validator("description", "notes")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("end_date")
    @classmethod
    def validate_end_date(cls, v: date | None, info: ValidationInfo) -> date | None:
        check_date_range(info.data.get("start_date"), v)
        return v

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, with ids left as domain types."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class ProjectFilters(BaseModel):
    """Filters for listing projects.

    Present filters combine with AND. Ranges are inclusive and open-ended
    when only one bound is given; end-date bounds only match rows that
    have an end date.
    """

    model_config = ConfigDict(extra="forbid")

    search: str | None = Field(default=None, max_length=200)
    client_id: ClientId | None = None
    status: ProjectStatus | None = None
    start_date_from: date | None = None
    start_date_to: date | None = None
    end_date_from: date | None = None
    end_date_to: date | None = None
    limit: int | None = Field(default=None, ge=1)

    @field_validator("search")
    @classmethod
    def validate_search(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("start_date_to")
    @classmethod
    def validate_start_range(cls, v: date | None, info: ValidationInfo) -> date | None:
        lower = info.data.get("start_date_from")
        if v is not None and lower is not None and v < lower:
            raise ValueError("start_date_to must not be before start_date_from")
        return v

    @field_validator("end_date_to")
    @classmethod
    def validate_end_range(cls, v: date | None, info: ValidationInfo) -> date | None:
        lower = info.data.get("end_date_from")
        if v is not None and lower is not None and v < lower:
            raise ValueError("end_date_to must not be before end_date_from")
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: ProjectId
    organization_id: OrganizationId
    name: str
    description: str | None
    client_id: ClientId | None
    status: ProjectStatus
    start_date: date
    end_date: date | None
    budget: int | None
    notes: str | None
    version: int
    created_at: datetime
    updated_at: datetime
