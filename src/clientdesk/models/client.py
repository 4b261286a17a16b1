"""Client model - organization-scoped, soft-deletable."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel

from src.clientdesk.models.base import utc_now


class Client(SQLModel, table=True):
    """Business contact owned by one organization.

    Rows are never hard-deleted; `deleted_at` marks a client inactive.
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index("ix_clients_org_deleted", "organization_id", "deleted_at"),
        Index("ix_clients_org_company_name", "organization_id", "company_name"),
        Index(
            "ix_clients_org_active",
            "organization_id",
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: str = Field(max_length=255, index=True)
    company_name: str = Field(max_length=200)
    contact_person: str = Field(max_length=100)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=50)
    address: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None, max_length=2000)
    version: int = Field(default=1)
    deleted_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_deleted(self) -> bool:
        """Check if client is soft-deleted."""
        return self.deleted_at is not None
