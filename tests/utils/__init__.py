"""Test utilities package."""

from tests.utils.cleanup import cleanup_organization

__all__ = [
    "cleanup_organization",
]
