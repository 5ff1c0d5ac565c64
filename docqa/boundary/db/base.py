"""
SQLAlchemy declarative base and shared column types.

Datetime columns are stored timezone-aware (UTC). The Annotated aliases
below carry their column options, so models declare e.g.
`created_at: Mapped[CreatedAt]` without repeating them.

Dependencies: sqlalchemy
System role: Foundation for the stats tables
"""

import uuid
from datetime import datetime, timezone
from typing import Annotated

from sqlalchemy import DateTime, MetaData, Uuid
from sqlalchemy.orm import DeclarativeBase, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


UUIDPrimaryKey = Annotated[
    uuid.UUID,
    mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4),
]
CreatedAt = Annotated[datetime, mapped_column(default=utc_now, index=True)]
UpdatedAt = Annotated[datetime, mapped_column(default=utc_now, onupdate=utc_now)]


class Base(DeclarativeBase):
    """Declarative base for the counter and query log tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
    type_annotation_map = {datetime: DateTime(timezone=True)}
