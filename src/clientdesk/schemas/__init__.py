from src.clientdesk.schemas.client import (
    ClientCreate,
    ClientFilters,
    ClientRead,
    ClientUpdate,
)
from src.clientdesk.schemas.project import (
    ProjectCreate,
    ProjectFilters,
    ProjectRead,
    ProjectUpdate,
)

__all__ = [
    # Client
    "ClientCreate",
    "ClientFilters",
    "ClientRead",
    "ClientUpdate",
    # Project
    "ProjectCreate",
    "ProjectFilters",
    "ProjectRead",
    "ProjectUpdate",
]
