"""Resource queries - SQL access for the ``resources`` table."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Resource
from ..schemas import ResourceFilters

# Request field name -> ORM attribute name
_ATTRIBUTES = {"metadata": "metadata_"}


@dataclass
class ResourcePage:
    """Rows for one page plus the count of all rows matching the filters."""

    rows: list[Resource]
    total: int


def _attribute(field: str) -> str:
    return _ATTRIBUTES.get(field, field)


def _filter_conditions(filters: ResourceFilters) -> list:
    conditions = []
    if filters.type:
        conditions.append(Resource.type.icontains(filters.type, autoescape=True))
    if filters.status:
        conditions.append(Resource.status == filters.status)
    if filters.name:
        conditions.append(Resource.name.icontains(filters.name, autoescape=True))
    return conditions


class ResourceQueries:
    """Store access bound to one session; performs no validation."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, fields: dict[str, Any]) -> Resource:
        now = datetime.now(timezone.utc)
        values = {_attribute(k): v for k, v in fields.items() if v is not None}
        resource = Resource(**values, created_at=now, updated_at=now)
        self._session.add(resource)
        await self._session.commit()
        await self._session.refresh(resource)
        return resource

    async def list_resources(self, filters: ResourceFilters) -> ResourcePage:
        """Return matching rows, newest first, and the unpaginated total."""
        conditions = _filter_conditions(filters)

        count_query = select(func.count()).select_from(Resource).where(*conditions)
        total = (await self._session.execute(count_query)).scalar_one()

        query = (
            select(Resource)
            .where(*conditions)
            .order_by(Resource.created_at.desc(), Resource.id.desc())
        )
        if filters.limit is not None:
            query = query.limit(filters.limit)
        if filters.offset:
            query = query.offset(filters.offset)

        result = await self._session.execute(query)
        return ResourcePage(rows=list(result.scalars().all()), total=total)

    async def get_by_id(self, resource_id: int) -> Resource | None:
        return await self._session.get(Resource, resource_id)

    async def update(self, resource_id: int, fields: dict[str, Any]) -> Resource | None:
        """Apply ``fields`` and refresh ``updated_at``; None if the row is gone."""
        resource = await self._session.get(Resource, resource_id)
        if resource is None:
            return None

        for field, value in fields.items():
            setattr(resource, _attribute(field), value)
        resource.updated_at = datetime.now(timezone.utc)

        await self._session.commit()
        await self._session.refresh(resource)
        return resource

    async def delete(self, resource_id: int) -> bool:
        """Delete the row; False when nothing was removed."""
        result = await self._session.execute(delete(Resource).where(Resource.id == resource_id))
        await self._session.commit()
        return result.rowcount > 0

    async def exists(self, resource_id: int) -> bool:
        query = select(Resource.id).where(Resource.id == resource_id)
        return (await self._session.execute(query)).scalar_one_or_none() is not None
