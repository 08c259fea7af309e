"""Service layer."""

from .resources import DEFAULT_LIMIT, ResourceList, ResourceService

__all__ = ["DEFAULT_LIMIT", "ResourceList", "ResourceService"]
