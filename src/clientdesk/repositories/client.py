"""Repository for Client entity (organization-scoped)."""

from datetime import datetime
from typing import Any

from sqlalchemy import update

from src.clientdesk.domain.identifiers import ClientId
from src.clientdesk.models import Client
from src.clientdesk.repositories.base import BaseRepository
from src.clientdesk.repositories.filters import client_conditions
from src.clientdesk.schemas.client import ClientFilters


class ClientRepository(BaseRepository[Client]):
    """Repository for clients of one organization."""

    model = Client

    async def get(self, client_id: ClientId) -> Client | None:
        """Get a client by id, whether active or soft-deleted."""
        return await self._get(client_id.value)

    async def get_for_reference(self, client_id: ClientId) -> Client | None:
        """Get a client and hold a share lock on it until the transaction ends.

        A concurrent soft delete waits for the lock, so a project that links
        to the client commits before the delete detaches projects. If the
        delete got there first, the read waits for it and sees `deleted_at`.
        """
        result = await self.session.execute(
            self._scoped()
            .where(Client.id == client_id.value)  # type: ignore[arg-type]
            .with_for_update(read=True)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_all(self, filters: ClientFilters | None, limit: int) -> list[Client]:
        """List clients ordered by company name (id breaks ties)."""
        query = (
            self._scoped()
            .where(*client_conditions(filters))
            .order_by(Client.company_name, Client.id)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update_versioned(
        self, client_id: ClientId, expected_version: int, values: dict[str, Any]
    ) -> bool:
        return await self._update_versioned(client_id.value, expected_version, values)

    async def _set_deleted_at(
        self, client_id: ClientId, deleted_at: datetime | None, *, currently_deleted: bool
    ) -> bool:
        stmt = (
            update(Client)
            .where(Client.id == client_id.value)  # type: ignore[arg-type]
            .where(Client.organization_id == self._org)  # type: ignore[arg-type]
            .values(deleted_at=deleted_at)
            .execution_options(synchronize_session=False)
        )
        if currently_deleted:
            stmt = stmt.where(Client.deleted_at.is_not(None))  # type: ignore[union-attr]
        else:
            stmt = stmt.where(Client.deleted_at.is_(None))  # type: ignore[union-attr]
        result = await self.session.execute(stmt)
        return (result.rowcount or 0) == 1  # type: ignore[attr-defined]

    async def mark_deleted(self, client_id: ClientId, deleted_at: datetime) -> bool:
        """Soft-delete an active client. Leaves version and updated_at untouched.

        Returns:
            False if the client is missing or already deleted
        """
        return await self._set_deleted_at(client_id, deleted_at, currently_deleted=False)

    async def clear_deleted(self, client_id: ClientId) -> bool:
        """Restore a soft-deleted client.

        Returns:
            False if the client is missing or not deleted
        """
        return await self._set_deleted_at(client_id, None, currently_deleted=True)
