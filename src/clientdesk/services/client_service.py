"""Client record store."""

from collections.abc import Mapping
from typing import Any

from src.clientdesk.core.logging import get_logger
from src.clientdesk.domain.identifiers import ClientId, OrganizationId
from src.clientdesk.domain.results import (
    ErrorKind,
    InvalidStateError,
    Result,
    conflict,
    fail,
    not_found,
    ok,
)
from src.clientdesk.models import Client
from src.clientdesk.models.base import utc_now
from src.clientdesk.repositories import ClientRepository, ProjectRepository
from src.clientdesk.schemas.client import ClientCreate, ClientFilters, ClientRead, ClientUpdate
from src.clientdesk.services.base import (
    BaseService,
    check_expected_version,
    parse_input,
    translate_database_errors,
)
from src.clientdesk.services.integrity import ReferentialIntegrityCoordinator

logger = get_logger(__name__)


class ClientService(BaseService):
    """Create, read, update, soft-delete and restore clients of an organization."""

    entity = "Client"

    @translate_database_errors("client_create_failed")
    async def create(
        self,
        organization_id: OrganizationId,
        data: ClientCreate | Mapping[str, Any],
    ) -> Result[ClientRead, ErrorKind]:
        """Create a client with version 1 and no deletion mark."""
        organization_id = OrganizationId.parse(organization_id)
        payload = parse_input(ClientCreate, data)
        if not isinstance(payload, ClientCreate):
            return fail(payload)

        async with self.transaction() as session:
            repo = ClientRepository(session, organization_id)
            client = Client(**payload.model_dump())
            repo.add(client)
            await session.flush()
            created = ClientRead.model_validate(client)

        logger.info(
            "client_created", client_id=str(created.id), **self.log_context(organization_id)
        )
        return ok(created)

    @translate_database_errors("client_list_failed")
    async def list_clients(
        self,
        organization_id: OrganizationId,
        filters: ClientFilters | Mapping[str, Any] | None = None,
    ) -> Result[list[ClientRead], ErrorKind]:
        """List clients by company name; soft-deleted ones only with include_deleted."""
        organization_id = OrganizationId.parse(organization_id)
        parsed = parse_input(ClientFilters, filters)
        if not isinstance(parsed, ClientFilters):
            return fail(parsed)

        async with self.transaction() as session:
            repo = ClientRepository(session, organization_id)
            clients = await repo.list_all(parsed, self.list_limit(parsed.limit))
            return ok([ClientRead.model_validate(c) for c in clients])

    @translate_database_errors("client_get_failed")
    async def get_by_id(
        self,
        organization_id: OrganizationId,
        client_id: ClientId | str,
    ) -> Result[ClientRead, ErrorKind]:
        """Get a client whether or not it is soft-deleted.

        A client of another organization is reported exactly like a missing one.
        """
        organization_id = OrganizationId.parse(organization_id)
        try:
            client_id = ClientId.parse(client_id)
        except ValueError:
            return fail(not_found(self.entity))

        async with self.transaction() as session:
            client = await ClientRepository(session, organization_id).get(client_id)
            if client is None:
                return fail(not_found(self.entity))
            return ok(ClientRead.model_validate(client))

    @translate_database_errors("client_update_failed")
    async def update(
        self,
        organization_id: OrganizationId,
        client_id: ClientId | str,
        data: ClientUpdate | Mapping[str, Any],
        expected_version: int,
    ) -> Result[ClientRead, ErrorKind]:
        """Apply the provided fields if the stored version equals expected_version.

        On success the version becomes expected_version + 1. A stale version
        fails with ConflictError and leaves the row untouched.
        """
        organization_id = OrganizationId.parse(organization_id)
        try:
            client_id = ClientId.parse(client_id)
        except ValueError:
            return fail(not_found(self.entity))

        payload = parse_input(ClientUpdate, data)
        if not isinstance(payload, ClientUpdate):
            return fail(payload)
        if (version_error := check_expected_version(expected_version)) is not None:
            return fail(version_error)

        async with self.transaction() as session:
            repo = ClientRepository(session, organization_id)
            if not await repo.update_versioned(client_id, expected_version, payload.changes()):
                current = await repo.get(client_id)
                if current is None:
                    return fail(not_found(self.entity))
                logger.warning(
                    "client_version_conflict",
                    client_id=str(client_id),
                    expected_version=expected_version,
                    current_version=current.version,
                    **self.log_context(organization_id),
                )
                return fail(conflict(self.entity))

            client = await repo.get(client_id)
            updated = ClientRead.model_validate(client)

        logger.info(
            "client_updated",
            client_id=str(client_id),
            version=updated.version,
            **self.log_context(organization_id),
        )
        return ok(updated)

    @translate_database_errors("client_soft_delete_failed")
    async def soft_delete(
        self,
        organization_id: OrganizationId,
        client_id: ClientId | str,
    ) -> Result[ClientRead, ErrorKind]:
        """Mark an active client deleted and detach its projects, atomically.

        Deleting an already deleted client fails with InvalidStateError.
        The version is not bumped.
        """
        organization_id = OrganizationId.parse(organization_id)
        try:
            client_id = ClientId.parse(client_id)
        except ValueError:
            return fail(not_found(self.entity))

        async with self.transaction() as session:
            clients = ClientRepository(session, organization_id)
            coordinator = ReferentialIntegrityCoordinator(
                ProjectRepository(session, organization_id)
            )

            if not await clients.mark_deleted(client_id, utc_now()):
                if await clients.get(client_id) is None:
                    return fail(not_found(self.entity))
                return fail(InvalidStateError(message="Client is already deleted"))

            detached = await coordinator.client_soft_deleted(client_id)
            deleted = ClientRead.model_validate(await clients.get(client_id))

        logger.info(
            "client_soft_deleted",
            client_id=str(client_id),
            detached_projects=detached,
            **self.log_context(organization_id),
        )
        return ok(deleted)

    @translate_database_errors("client_restore_failed")
    async def restore(
        self,
        organization_id: OrganizationId,
        client_id: ClientId | str,
    ) -> Result[ClientRead, ErrorKind]:
        """Clear the deletion mark. Projects detached by the deletion stay detached."""
        organization_id = OrganizationId.parse(organization_id)
        try:
            client_id = ClientId.parse(client_id)
        except ValueError:
            return fail(not_found(self.entity))

        async with self.transaction() as session:
            repo = ClientRepository(session, organization_id)
            if not await repo.clear_deleted(client_id):
                if await repo.get(client_id) is None:
                    return fail(not_found(self.entity))
                return fail(InvalidStateError(message="Client is not deleted"))
            restored = ClientRead.model_validate(await repo.get(client_id))

        logger.info(
            "client_restored", client_id=str(client_id), **self.log_context(organization_id)
        )
        return ok(restored)
