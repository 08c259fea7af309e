"""FastAPI dependencies wiring the service to a request-scoped session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_async_session
from .queries import ResourceQueries
from .services import ResourceService


async def get_resource_service(
    db: AsyncSession = Depends(get_async_session),
) -> ResourceService:
    """Build a ``ResourceService`` over the session of the current request."""
    return ResourceService(ResourceQueries(db))
