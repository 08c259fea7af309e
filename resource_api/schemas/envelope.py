"""Response envelope schemas.

Every endpoint answers ``{success, message, data?, pagination?}``.
"""

from pydantic import BaseModel, Field

from .resource import ResourceRead, ResourceStats


class Envelope(BaseModel):
    """Envelope without payload, used for errors and deletions."""

    success: bool
    message: str


class Pagination(BaseModel):
    total: int
    page: int
    total_pages: int = Field(serialization_alias="totalPages")
    limit: int


class ResourceResponse(Envelope):
    data: ResourceRead


class ResourceListResponse(Envelope):
    data: list[ResourceRead]
    pagination: Pagination


class ResourceStatsResponse(Envelope):
    data: ResourceStats
