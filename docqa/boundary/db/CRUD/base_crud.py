"""
Shared persistence helpers for the stats tables.

Dependencies: sqlalchemy
System role: Foundation for the CRUD classes
"""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from docqa.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Table-agnostic operations; subclasses add table-specific statements.

    Methods never commit. Callers own the transaction.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """Insert a row and flush, so Python-side defaults (id, timestamps) are populated."""
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        return instance

    async def get_by_id(self, session: AsyncSession, key: Any) -> ModelT | None:
        return await session.get(self.model, key)

    async def list_ordered(
        self,
        session: AsyncSession,
        order_by: ColumnElement,
        limit: int,
    ) -> Sequence[ModelT]:
        """At most limit rows in the given order."""
        result = await session.scalars(select(self.model).order_by(order_by).limit(limit))
        return result.all()
