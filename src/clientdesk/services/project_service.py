"""Project record store."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.clientdesk.core.logging import get_logger
from src.clientdesk.domain.identifiers import ClientId, OrganizationId, ProjectId
from src.clientdesk.domain.results import (
    ErrorKind,
    Result,
    ValidationError,
    conflict,
    fail,
    not_found,
    ok,
)
from src.clientdesk.models import Project, ProjectStatus
from src.clientdesk.repositories import ClientRepository, ProjectRepository
from src.clientdesk.schemas.project import (
    END_BEFORE_START_MESSAGE,
    ProjectCreate,
    ProjectFilters,
    ProjectRead,
    ProjectUpdate,
)
from src.clientdesk.services.base import (
    BaseService,
    check_expected_version,
    parse_input,
    translate_database_errors,
)

logger = get_logger(__name__)


def _column_values(changes: dict[str, Any]) -> dict[str, Any]:
    """Unwrap domain types into the values stored in the projects table."""
    values: dict[str, Any] = {}
    for name, value in changes.items():
        if isinstance(value, ClientId):
            value = value.value
        elif isinstance(value, Enum):
            value = value.value
        values[name] = value
    return values


class ProjectService(BaseService):
    """Create, read, update and delete projects of an organization."""

    entity = "Project"

    async def _check_client_reference(
        self, session: AsyncSession, organization_id: OrganizationId, client_id: ClientId
    ) -> ValidationError | None:
        """A project may only reference an active client of its own organization."""
        client = await ClientRepository(session, organization_id).get_for_reference(client_id)
        if client is None:
            reason = "Client not found"
        elif client.is_deleted:
            reason = "Client has been deleted"
        else:
            return None
        return ValidationError(message="Invalid client reference", fields={"client_id": reason})

    @translate_database_errors("project_create_failed")
    async def create(
        self,
        organization_id: OrganizationId,
        data: ProjectCreate | Mapping[str, Any],
    ) -> Result[ProjectRead, ErrorKind]:
        """Create a project with version 1; status defaults to Planning."""
        organization_id = OrganizationId.parse(organization_id)
        payload = parse_input(ProjectCreate, data)
        if not isinstance(payload, ProjectCreate):
            return fail(payload)

        async with self.transaction() as session:
            if payload.client_id is not None:
                error = await self._check_client_reference(
                    session, organization_id, payload.client_id
                )
                if error is not None:
                    return fail(error)

            repo = ProjectRepository(session, organization_id)
            values = {name: getattr(payload, name) for name in type(payload).model_fields}
            project = Project(**_column_values(values))
            repo.add(project)
            await session.flush()
            created = ProjectRead.model_validate(project)

        logger.info(
            "project_created",
            project_id=str(created.id),
            client_id=str(created.client_id) if created.client_id else None,
            **self.log_context(organization_id),
        )
        return ok(created)

    @translate_database_errors("project_list_failed")
    async def list_projects(
        self,
        organization_id: OrganizationId,
        filters: ProjectFilters | Mapping[str, Any] | None = None,
    ) -> Result[list[ProjectRead], ErrorKind]:
        """List projects by name, narrowed by any filters given."""
        organization_id = OrganizationId.parse(organization_id)
        parsed = parse_input(ProjectFilters, filters)
        if not isinstance(parsed, ProjectFilters):
            return fail(parsed)

        async with self.transaction() as session:
            repo = ProjectRepository(session, organization_id)
            projects = await repo.list_all(parsed, self.list_limit(parsed.limit))
            return ok([ProjectRead.model_validate(p) for p in projects])

    @translate_database_errors("project_get_failed")
    async def get_by_id(
        self,
        organization_id: OrganizationId,
        project_id: ProjectId | str,
    ) -> Result[ProjectRead, ErrorKind]:
        organization_id = OrganizationId.parse(organization_id)
        try:
            project_id = ProjectId.parse(project_id)
        except ValueError:
            return fail(not_found(self.entity))

        async with self.transaction() as session:
            project = await ProjectRepository(session, organization_id).get(project_id)
            if project is None:
                return fail(not_found(self.entity))
            return ok(ProjectRead.model_validate(project))

    @translate_database_errors("project_get_by_client_failed")
    async def get_by_client(
        self,
        organization_id: OrganizationId,
        client_id: ClientId | str,
    ) -> Result[list[ProjectRead], ErrorKind]:
        """Projects of any status referencing the client, earliest start first."""
        organization_id = OrganizationId.parse(organization_id)
        try:
            client_id = ClientId.parse(client_id)
        except ValueError:
            return ok([])

        async with self.transaction() as session:
            projects = await ProjectRepository(session, organization_id).list_by_client(client_id)
            return ok([ProjectRead.model_validate(p) for p in projects])

    @translate_database_errors("project_update_failed")
    async def update(
        self,
        organization_id: OrganizationId,
        project_id: ProjectId | str,
        data: ProjectUpdate | Mapping[str, Any],
        expected_version: int,
    ) -> Result[ProjectRead, ErrorKind]:
        """Apply the provided fields if the stored version equals expected_version.

        The date range is checked against the stored values of any date not
        in the payload, and a changed client_id must reference an active
        client of the organization.
        """
        organization_id = OrganizationId.parse(organization_id)
        try:
            project_id = ProjectId.parse(project_id)
        except ValueError:
            return fail(not_found(self.entity))

        payload = parse_input(ProjectUpdate, data)
        if not isinstance(payload, ProjectUpdate):
            return fail(payload)
        if (version_error := check_expected_version(expected_version)) is not None:
            return fail(version_error)
        changes = payload.changes()

        async with self.transaction() as session:
            repo = ProjectRepository(session, organization_id)
            current = await repo.get(project_id)
            if current is None:
                return fail(not_found(self.entity))
            if current.version != expected_version:
                return fail(self._conflict(organization_id, project_id, expected_version, current))

            start_date = changes.get("start_date", current.start_date)
            end_date = changes.get("end_date", current.end_date)
            if end_date is not None and end_date < start_date:
                return fail(
                    ValidationError(
                        message="Invalid input data",
                        fields={"end_date": END_BEFORE_START_MESSAGE},
                    )
                )

            new_client_id = changes.get("client_id")
            if new_client_id is not None:
                error = await self._check_client_reference(session, organization_id, new_client_id)
                if error is not None:
                    return fail(error)

            if not await repo.update_versioned(
                project_id, expected_version, _column_values(changes)
            ):
                # Lost the race between the read above and the conditional write
                current = await repo.get(project_id)
                if current is None:
                    return fail(not_found(self.entity))
                return fail(self._conflict(organization_id, project_id, expected_version, current))

            updated = ProjectRead.model_validate(await repo.get(project_id))

        logger.info(
            "project_updated",
            project_id=str(project_id),
            version=updated.version,
            fields=sorted(changes),
            **self.log_context(organization_id),
        )
        return ok(updated)

    async def update_status(
        self,
        organization_id: OrganizationId,
        project_id: ProjectId | str,
        new_status: ProjectStatus | str,
        expected_version: int,
    ) -> Result[ProjectRead, ErrorKind]:
        """Change only the status. Any status may move to any other."""
        return await self.update(
            organization_id, project_id, {"status": new_status}, expected_version
        )

    @translate_database_errors("project_delete_failed")
    async def delete(
        self,
        organization_id: OrganizationId,
        project_id: ProjectId | str,
    ) -> Result[None, ErrorKind]:
        """Permanently remove a project."""
        organization_id = OrganizationId.parse(organization_id)
        try:
            project_id = ProjectId.parse(project_id)
        except ValueError:
            return fail(not_found(self.entity))

        async with self.transaction() as session:
            if not await ProjectRepository(session, organization_id).delete(project_id):
                return fail(not_found(self.entity))

        logger.info(
            "project_deleted", project_id=str(project_id), **self.log_context(organization_id)
        )
        return ok(None)

    def _conflict(
        self,
        organization_id: OrganizationId,
        project_id: ProjectId,
        expected_version: int,
        current: Project,
    ):
        logger.warning(
            "project_version_conflict",
            project_id=str(project_id),
            expected_version=expected_version,
            current_version=current.version,
            **self.log_context(organization_id),
        )
        return conflict(self.entity)
