"""Resource model."""

from enum import Enum
from typing import Any

from sqlalchemy import JSON, Enum as SAEnum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ResourceStatus(str, Enum):
    """Allowed resource statuses."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


RESOURCE_STATUSES = tuple(s.value for s in ResourceStatus)

# Upper bound of the 32-bit INTEGER id column
MAX_RESOURCE_ID = 2**31 - 1


class Resource(Base):
    """Resource model - a named, typed record with an opaque metadata document."""

    __tablename__ = "resources"
    # SQLite would otherwise hand out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    description: Mapped[str | None] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(255), index=True)
    # Stored as a string column with a CHECK constraint, not a native enum type
    status: Mapped[str] = mapped_column(
        SAEnum(
            *RESOURCE_STATUSES,
            name="resource_status",
            native_enum=False,
            create_constraint=True,
        ),
        default=ResourceStatus.ACTIVE.value,
        server_default=ResourceStatus.ACTIVE.value,
        index=True,
    )
    metadata_: Mapped[Any] = mapped_column("metadata", JSON(none_as_null=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Resource id={self.id} name={self.name!r} status={self.status}>"
