"""Repository for Project entity (organization-scoped)."""

from typing import Any

from sqlalchemy import delete, update

from src.clientdesk.domain.identifiers import ClientId, ProjectId
from src.clientdesk.models import Project
from src.clientdesk.repositories.base import BaseRepository
from src.clientdesk.repositories.filters import project_conditions
from src.clientdesk.schemas.project import ProjectFilters


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects of one organization."""

    model = Project

    async def get(self, project_id: ProjectId) -> Project | None:
        return await self._get(project_id.value)

    async def list_all(self, filters: ProjectFilters | None, limit: int) -> list[Project]:
        """List projects ordered by name (id breaks ties)."""
        query = (
            self._scoped()
            .where(*project_conditions(filters))
            .order_by(Project.name, Project.id)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_client(self, client_id: ClientId) -> list[Project]:
        """All projects referencing a client, any status, earliest start first."""
        query = (
            self._scoped()
            .where(Project.client_id == client_id.value)  # type: ignore[arg-type]
            .order_by(Project.start_date, Project.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update_versioned(
        self, project_id: ProjectId, expected_version: int, values: dict[str, Any]
    ) -> bool:
        return await self._update_versioned(project_id.value, expected_version, values)

    async def delete(self, project_id: ProjectId) -> bool:
        """Permanently remove a project.

        Returns:
            False if no such project exists in this organization
        """
        stmt = (
            delete(Project)
            .where(Project.id == project_id.value)  # type: ignore[arg-type]
            .where(Project.organization_id == self._org)  # type: ignore[arg-type]
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return (result.rowcount or 0) == 1  # type: ignore[attr-defined]

    async def detach_client(self, client_id: ClientId) -> int:
        """Null out client_id on every project of this organization referencing the client.

        Only client_id changes: version and updated_at are left as they are.

        Returns:
            Number of projects detached
        """
        stmt = (
            update(Project)
            .where(Project.organization_id == self._org)  # type: ignore[arg-type]
            .where(Project.client_id == client_id.value)  # type: ignore[arg-type]
            .values(client_id=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]
