"""Referential integrity between clients and projects."""

from src.clientdesk.core.logging import get_logger, organization_log_value
from src.clientdesk.domain.identifiers import ClientId
from src.clientdesk.repositories import ProjectRepository

logger = get_logger(__name__)


class ReferentialIntegrityCoordinator:
    """Keeps projects consistent when the client they reference goes away.

    Must run on the same session, inside the same transaction, as the
    client write that triggers it: either both effects commit or neither.
    """

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def client_soft_deleted(self, client_id: ClientId) -> int:
        """Detach every project of the organization from the deleted client.

        Projects are neither deleted nor otherwise modified.

        Returns:
            Number of projects detached
        """
        detached = await self.project_repo.detach_client(client_id)
        if detached:
            logger.info(
                "client_projects_detached",
                organization_id=organization_log_value(self.project_repo.organization_id.value),
                client_id=str(client_id),
                project_count=detached,
            )
        return detached
