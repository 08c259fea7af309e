"""Common schemas."""

from .envelope import (
    Envelope,
    Pagination,
    ResourceListResponse,
    ResourceResponse,
    ResourceStatsResponse,
)
from .resource import (
    ResourceCreate,
    ResourceFilters,
    ResourceRead,
    ResourceStats,
    ResourceUpdate,
)

__all__ = [
    "Envelope",
    "Pagination",
    "ResourceCreate",
    "ResourceFilters",
    "ResourceListResponse",
    "ResourceRead",
    "ResourceResponse",
    "ResourceStats",
    "ResourceStatsResponse",
    "ResourceUpdate",
]
