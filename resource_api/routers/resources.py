"""Resources router - CRUD, filtered listing and statistics."""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
import structlog

from ..dependencies import get_resource_service
from ..errors import NotFoundError, ValidationError
from ..schemas import (
    Envelope,
    Pagination,
    ResourceCreate,
    ResourceFilters,
    ResourceListResponse,
    ResourceRead,
    ResourceResponse,
    ResourceStatsResponse,
    ResourceUpdate,
)
from ..services import ResourceService

logger = structlog.get_logger()

router = APIRouter(tags=["resources"])

# Keeps (page - 1) * limit inside a 64-bit LIMIT/OFFSET
MAX_PAGING_VALUE = 2**31 - 1


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=Envelope(success=False, message=message).model_dump(),
    )


def _unexpected(status_code: int, action: str, exc: Exception) -> JSONResponse:
    logger.error(
        "resource_request_failed",
        action=action,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )
    return _error(status_code, f"Failed to {action}: {exc}")


def _parse_id(raw_id: str) -> int | None:
    # int() alone would also take "1_0", " 1 " and non-ASCII digits
    if not (raw_id.isascii() and raw_id.removeprefix("-").isdigit()):
        return None
    return int(raw_id)


# Registered before /resources/{resource_id} so "stats" is not taken for an id
@router.get("/resources/stats", response_model=ResourceStatsResponse)
async def get_resource_stats(
    service: ResourceService = Depends(get_resource_service),
):
    """Get resource counts by status and by type."""
    try:
        stats = await service.get_resource_stats()
    except Exception as e:
        return _unexpected(status.HTTP_500_INTERNAL_SERVER_ERROR, "fetch resource statistics", e)

    return ResourceStatsResponse(
        success=True,
        message="Resource statistics retrieved successfully",
        data=stats,
    )


@router.post(
    "/resources",
    response_model=ResourceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_resource(
    resource_in: ResourceCreate,
    service: ResourceService = Depends(get_resource_service),
):
    """Create a new resource."""
    try:
        resource = await service.create_resource(resource_in)
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _unexpected(status.HTTP_400_BAD_REQUEST, "create resource", e)

    return ResourceResponse(
        success=True,
        message="Resource created successfully",
        data=ResourceRead.model_validate(resource),
    )


@router.get("/resources", response_model=ResourceListResponse)
async def list_resources(
    resource_type: str | None = Query(None, alias="type"),
    resource_status: str | None = Query(None, alias="status"),
    name: str | None = None,
    page: int = Query(1, ge=1, le=MAX_PAGING_VALUE),
    limit: int = Query(10, ge=1, le=MAX_PAGING_VALUE),
    service: ResourceService = Depends(get_resource_service),
):
    """List resources with optional filters and page-based pagination."""
    filters = ResourceFilters(
        type=resource_type,
        status=resource_status,
        name=name,
        limit=limit,
        offset=(page - 1) * limit,
    )

    try:
        result = await service.get_resources(filters)
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _unexpected(status.HTTP_500_INTERNAL_SERVER_ERROR, "fetch resources", e)

    return ResourceListResponse(
        success=True,
        message="Resources retrieved successfully",
        data=[ResourceRead.model_validate(r) for r in result.data],
        pagination=Pagination(
            total=result.total,
            page=result.page,
            total_pages=result.total_pages,
            limit=limit,
        ),
    )


@router.get("/resources/{resource_id}", response_model=ResourceResponse)
async def get_resource(
    resource_id: str,
    service: ResourceService = Depends(get_resource_service),
):
    """Get a resource by ID."""
    parsed_id = _parse_id(resource_id)
    if parsed_id is None:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid resource ID")

    try:
        resource = await service.get_resource_by_id(parsed_id)
    except NotFoundError as e:
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _unexpected(status.HTTP_500_INTERNAL_SERVER_ERROR, "fetch resource", e)

    return ResourceResponse(
        success=True,
        message="Resource retrieved successfully",
        data=ResourceRead.model_validate(resource),
    )


@router.put("/resources/{resource_id}", response_model=ResourceResponse)
async def update_resource(
    resource_id: str,
    resource_in: ResourceUpdate,
    service: ResourceService = Depends(get_resource_service),
):
    """Partially update a resource."""
    parsed_id = _parse_id(resource_id)
    if parsed_id is None:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid resource ID")

    try:
        resource = await service.update_resource(parsed_id, resource_in)
    except NotFoundError as e:
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _unexpected(status.HTTP_400_BAD_REQUEST, "update resource", e)

    return ResourceResponse(
        success=True,
        message="Resource updated successfully",
        data=ResourceRead.model_validate(resource),
    )


@router.delete("/resources/{resource_id}", response_model=Envelope)
async def delete_resource(
    resource_id: str,
    service: ResourceService = Depends(get_resource_service),
):
    """Delete a resource."""
    parsed_id = _parse_id(resource_id)
    if parsed_id is None:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid resource ID")

    try:
        await service.delete_resource(parsed_id)
    except NotFoundError as e:
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _unexpected(status.HTTP_500_INTERNAL_SERVER_ERROR, "delete resource", e)

    return Envelope(success=True, message="Resource deleted successfully")
