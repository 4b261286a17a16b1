"""Base repository with organization-scoped CRUD operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.clientdesk.domain.identifiers import OrganizationId
from src.clientdesk.models.base import utc_now


class BaseRepository[ModelType: SQLModel]:
    """Base repository bound to a single organization.

    Every statement issued through a repository carries the organization
    predicate, so a repository can neither read nor write rows of another
    tenant. Repositories handle data access only; the transaction is owned
    by the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession, organization_id: OrganizationId):
        self.session = session
        self.organization_id = organization_id

    @property
    def _org(self) -> str:
        return self.organization_id.value

    def _scoped(self):
        """SELECT for this repository's model restricted to the organization."""
        return select(self.model).where(
            self.model.organization_id == self._org  # type: ignore[attr-defined]
        )

    async def _get(self, id: UUID) -> ModelType | None:
        """Get a record of this organization by primary key, bypassing the identity map."""
        result = await self.session.execute(
            self._scoped()
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session under this organization (no flush/commit)."""
        entity.organization_id = self._org  # type: ignore[attr-defined]
        self.session.add(entity)

    async def _update_versioned(
        self, id: UUID, expected_version: int, values: dict[str, Any]
    ) -> bool:
        """Apply values only if the stored version still equals expected_version.

        The version predicate is part of the UPDATE itself, so of two
        writers holding the same version at most one matches a row.

        Returns:
            True if the row was updated (version is now expected_version + 1)
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .where(self.model.organization_id == self._org)  # type: ignore[attr-defined]
            .where(self.model.version == expected_version)  # type: ignore[attr-defined]
            .values(
                **values,
                version=self.model.version + 1,  # type: ignore[attr-defined]
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return (result.rowcount or 0) == 1  # type: ignore[attr-defined]
