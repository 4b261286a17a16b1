"""Predicate construction for list queries.

Each present filter contributes one condition; callers AND them together
with the organization predicate. Search is a case-insensitive substring
match with LIKE wildcards in the term escaped.
"""

from sqlalchemy import ColumnElement, or_

from src.clientdesk.models import Client, Project
from src.clientdesk.schemas.client import ClientFilters
from src.clientdesk.schemas.project import ProjectFilters


def client_conditions(filters: ClientFilters | None) -> list[ColumnElement[bool]]:
    """Conditions for a client listing. Soft-deleted rows are hidden unless asked for."""
    filters = filters or ClientFilters()
    conditions: list[ColumnElement[bool]] = []

    if not filters.include_deleted:
        conditions.append(Client.deleted_at.is_(None))  # type: ignore[union-attr]

    if filters.search:
        conditions.append(
            or_(
                Client.company_name.icontains(  # type: ignore[attr-defined]
                    filters.search, autoescape=True
                ),
                Client.contact_person.icontains(  # type: ignore[attr-defined]
                    filters.search, autoescape=True
                ),
            )
        )

    return conditions


def project_conditions(filters: ProjectFilters | None) -> list[ColumnElement[bool]]:
    """Conditions for a project listing. No status is excluded implicitly."""
    filters = filters or ProjectFilters()
    conditions: list[ColumnElement[bool]] = []

    if filters.search:
        conditions.append(
            or_(
                Project.name.icontains(  # type: ignore[attr-defined]
                    filters.search, autoescape=True
                ),
                Project.description.icontains(  # type: ignore[union-attr]
                    filters.search, autoescape=True
                ),
            )
        )

    if filters.client_id is not None:
        conditions.append(Project.client_id == filters.client_id.value)  # type: ignore[arg-type]

    if filters.status is not None:
        conditions.append(Project.status == filters.status.value)  # type: ignore[arg-type]

    if filters.start_date_from is not None:
        conditions.append(Project.start_date >= filters.start_date_from)  # type: ignore[arg-type]
    if filters.start_date_to is not None:
        conditions.append(Project.start_date <= filters.start_date_to)  # type: ignore[arg-type]

    # Comparisons against NULL are never true, so rows without an end date drop out
    if filters.end_date_from is not None:
        conditions.append(Project.end_date >= filters.end_date_from)  # type: ignore[operator]
    if filters.end_date_to is not None:
        conditions.append(Project.end_date <= filters.end_date_to)  # type: ignore[operator]

    return conditions
