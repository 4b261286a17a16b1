"""Shared enums for models."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project lifecycle status.

    Any status may be set from any other; there is no transition graph.
    """

    PLANNING = "Planning"
    ACTIVE = "Active"
    ON_HOLD = "OnHold"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
