"""Model exports.

Import from here: `from src.clientdesk.models import Client, Project`
"""

from src.clientdesk.models.client import Client
from src.clientdesk.models.enums import ProjectStatus
from src.clientdesk.models.project import Project

__all__ = [
    # Enums
    "ProjectStatus",
    # Tables
    "Client",
    "Project",
]
