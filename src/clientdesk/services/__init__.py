from src.clientdesk.services.client_service import ClientService
from src.clientdesk.services.integrity import ReferentialIntegrityCoordinator
from src.clientdesk.services.project_service import ProjectService

__all__ = ["ClientService", "ProjectService", "ReferentialIntegrityCoordinator"]
