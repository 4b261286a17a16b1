"""Project factory for test data generation."""

from datetime import date

from polyfactory import Use

from src.clientdesk.models import Project, ProjectStatus
from tests.factories.base import BaseFactory, generate_uuid, utc_now


class ProjectFactory(BaseFactory):
    """Factory for generating Project rows.

    organization_id must be passed explicitly.
    """

    __model__ = Project

    id = Use(generate_uuid)
    name = Use(lambda: f"Project {generate_uuid().hex[-8:]}")
    description = None
    client_id = None
    status = ProjectStatus.PLANNING.value
    start_date = date(2025, 1, 1)
    end_date = None
    budget = None
    notes = None
    version = 1
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
