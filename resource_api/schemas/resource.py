"""Resource schemas."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ResourceBase(BaseModel):
    """Fields a client may send for a resource.

    Values are only shape-checked here; business rules (required fields,
    allowed statuses) are enforced by ``ResourceService``.
    """

    name: str | None = None
    description: str | None = None
    type: str | None = None
    status: str | None = None
    metadata: Any = None


class ResourceCreate(ResourceBase):
    """Schema for creating a resource."""

    pass


class ResourceUpdate(ResourceBase):
    """Schema for a partial update; only fields present in the body apply."""

    pass


class ResourceRead(BaseModel):
    """Schema for reading a resource."""

    id: int
    name: str
    description: str | None = None
    type: str
    status: str
    metadata: Any = Field(default=None, validation_alias=AliasChoices("metadata_", "metadata"))
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ResourceFilters(BaseModel):
    """Listing filters; ``None`` means the filter is not applied."""

    type: str | None = None
    status: str | None = None
    name: str | None = None
    limit: int | None = Field(default=None, gt=0)
    offset: int | None = Field(default=None, ge=0)


class ResourceStats(BaseModel):
    """Aggregate counts over all resources."""

    total: int
    by_status: dict[str, int] = Field(default_factory=dict, serialization_alias="byStatus")
    by_type: dict[str, int] = Field(default_factory=dict, serialization_alias="byType")
