"""Database models package."""

from .base import Base
from .resource import MAX_RESOURCE_ID, RESOURCE_STATUSES, Resource, ResourceStatus

__all__ = [
    "Base",
    "Resource",
    "ResourceStatus",
    "RESOURCE_STATUSES",
    "MAX_RESOURCE_ID",
]
