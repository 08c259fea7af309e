"""Resource service - business rules between the router and the query layer."""

from dataclasses import dataclass
import math
from typing import Any

import structlog

from ..errors import NotFoundError, ValidationError
from ..models import MAX_RESOURCE_ID, RESOURCE_STATUSES, Resource
from ..queries import ResourceQueries
from ..schemas import ResourceCreate, ResourceFilters, ResourceStats, ResourceUpdate

logger = structlog.get_logger()

DEFAULT_LIMIT = 10

INVALID_STATUS_MESSAGE = f"Invalid status. Must be one of: {', '.join(RESOURCE_STATUSES)}"


@dataclass
class ResourceList:
    """One page of resources with pagination metadata."""

    data: list[Resource]
    total: int
    page: int
    total_pages: int


def _require_valid_id(resource_id: int) -> None:
    if not 0 < resource_id <= MAX_RESOURCE_ID:
        raise ValidationError("Valid resource ID is required")


def _require_valid_status(status: Any) -> None:
    if status not in RESOURCE_STATUSES:
        raise ValidationError(INVALID_STATUS_MESSAGE)


class ResourceService:
    """Validates input, checks existence and assembles derived fields."""

    def __init__(self, queries: ResourceQueries) -> None:
        self._queries = queries

    async def create_resource(self, data: ResourceCreate) -> Resource:
        """Create a resource.

        ``name`` and ``type`` must be non-empty; ``status`` is optional and
        defaults to ``active`` in the store.
        """
        if not data.name or not data.type:
            raise ValidationError("Name and type are required fields")
        if data.status is not None:
            _require_valid_status(data.status)

        resource = await self._queries.create(data.model_dump())
        logger.info(
            "resource_created",
            resource_id=resource.id,
            resource_type=resource.type,
            status=resource.status,
        )
        return resource

    async def get_resources(self, filters: ResourceFilters | None = None) -> ResourceList:
        """List resources, ``DEFAULT_LIMIT`` per page unless a limit is given."""
        filters = filters or ResourceFilters()
        limit = filters.limit or DEFAULT_LIMIT
        offset = filters.offset or 0
        page = offset // limit + 1

        result = await self._queries.list_resources(
            filters.model_copy(update={"limit": limit, "offset": offset})
        )

        return ResourceList(
            data=result.rows,
            total=result.total,
            page=page,
            total_pages=math.ceil(result.total / limit),
        )

    async def get_resource_by_id(self, resource_id: int) -> Resource:
        _require_valid_id(resource_id)

        resource = await self._queries.get_by_id(resource_id)
        if resource is None:
            logger.warning("resource_not_found", resource_id=resource_id)
            raise NotFoundError("Resource not found")
        return resource

    async def update_resource(self, resource_id: int, updates: ResourceUpdate) -> Resource:
        """Apply the fields present in ``updates``; ``id`` and ``created_at`` never change.

        The existence check and the write are separate statements. A row
        deleted in between is reported as not found as well.
        """
        _require_valid_id(resource_id)

        if not await self._queries.exists(resource_id):
            logger.warning("resource_not_found", resource_id=resource_id)
            raise NotFoundError("Resource not found")

        fields = updates.model_dump(exclude_unset=True)
        if "status" in fields:
            _require_valid_status(fields["status"])
        for required in ("name", "type"):
            if required in fields and not fields[required]:
                raise ValidationError("Name and type cannot be empty")

        resource = await self._queries.update(resource_id, fields)
        if resource is None:
            logger.warning("resource_vanished_before_update", resource_id=resource_id)
            raise NotFoundError("Resource not found")

        logger.info("resource_updated", resource_id=resource_id, fields=sorted(fields))
        return resource

    async def delete_resource(self, resource_id: int) -> None:
        _require_valid_id(resource_id)

        if not await self._queries.exists(resource_id):
            logger.warning("resource_not_found", resource_id=resource_id)
            raise NotFoundError("Resource not found")

        if not await self._queries.delete(resource_id):
            logger.warning("resource_vanished_before_delete", resource_id=resource_id)
            raise NotFoundError("Resource not found")

        logger.info("resource_deleted", resource_id=resource_id)

    async def get_resource_stats(self) -> ResourceStats:
        """Count resources per status and per type.

        Loads every row and counts in memory.
        """
        # TODO: push the counting into GROUP BY queries once the table grows
        # past what comfortably fits in one response.
        result = await self._queries.list_resources(ResourceFilters())

        stats = ResourceStats(total=result.total)
        for resource in result.rows:
            stats.by_status[resource.status] = stats.by_status.get(resource.status, 0) + 1
            stats.by_type[resource.type] = stats.by_type.get(resource.type, 0) + 1
        return stats
