"""Project model - organization-scoped, optionally linked to a client."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from src.clientdesk.models.base import utc_now
from src.clientdesk.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Engagement owned by one organization.

    `client_id` always points at a client of the same organization or is null.
    """

    __tablename__ = "projects"
    __table_args__ = (
        Index("ix_projects_org_client", "organization_id", "client_id"),
        Index("ix_projects_org_status", "organization_id", "status"),
        Index("ix_projects_org_start_date", "organization_id", "start_date"),
        CheckConstraint(
            "end_date IS NULL OR end_date >= start_date", name="ck_projects_date_range"
        ),
        CheckConstraint("budget IS NULL OR budget > 0", name="ck_projects_budget_positive"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: str = Field(max_length=255, index=True)
    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    client_id: UUID | None = Field(default=None, foreign_key="clients.id", ondelete="SET NULL")
    status: str = Field(default=ProjectStatus.PLANNING.value, max_length=50)
    start_date: date
    end_date: date | None = Field(default=None)
    # Smallest currency unit (cents)
    budget: int | None = Field(default=None)
    notes: str | None = Field(default=None, max_length=2000)
    version: int = Field(default=1)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
