"""Repository layer - organization-scoped data access."""

from src.clientdesk.repositories.base import BaseRepository
from src.clientdesk.repositories.client import ClientRepository
from src.clientdesk.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "ClientRepository",
    "ProjectRepository",
]
