"""Test helper functions for common data creation patterns."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from structlog.testing import CapturingLogger

from src.clientdesk.domain import ClientId, OrganizationId
from src.clientdesk.models import Client, Project
from tests.factories import ClientFactory, ProjectFactory


async def seed_client(
    session: AsyncSession, organization_id: OrganizationId, deleted: bool = False, **kwargs
) -> Client:
    """Insert a client row directly and commit it.

    Args:
        session: Database session
        organization_id: Owning organization
        deleted: Seed the client already soft-deleted
        **kwargs: Additional args passed to ClientFactory

    Returns:
        The committed Client row
    """
    build = ClientFactory.deleted if deleted else ClientFactory.build
    client = build(organization_id=organization_id.value, **kwargs)
    session.add(client)
    await session.commit()
    return client


async def seed_projects(
    session: AsyncSession,
    organization_id: OrganizationId,
    count: int,
    client_id: ClientId | UUID | None = None,
    **kwargs,
) -> list[Project]:
    """Insert `count` project rows, optionally referencing one client, and commit them."""
    client_uuid = ClientId.parse(client_id).value if client_id is not None else None
    projects = [
        ProjectFactory.build(
            organization_id=organization_id.value,
            client_id=client_uuid,
            **kwargs,
        )
        for _ in range(count)
    ]
    session.add_all(projects)
    await session.commit()
    return projects


def logged_events(cap_logger: CapturingLogger) -> list[str]:
    """Event names recorded by a CapturingLogger, in order."""
    return [call.kwargs["event"] for call in cap_logger.calls]
