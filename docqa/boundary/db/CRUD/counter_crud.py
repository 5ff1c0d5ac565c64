"""
Counter CRUD operations.

Dependencies: sqlalchemy
System role: Atomic counter increments
"""

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from docqa.boundary.db.base import utc_now
from docqa.boundary.db.CRUD.base_crud import BaseCRUD
from docqa.boundary.db.models.counter_model import CounterModel


class CounterCRUD(BaseCRUD[CounterModel]):
    """CRUD operations for named counters."""

    def __init__(self) -> None:
        super().__init__(CounterModel)

    async def increment(self, session: AsyncSession, name: str) -> int | None:
        """
        Atomically add one to an existing counter.

        Args:
            session: Async database session (caller owns the transaction)
            name: Counter name

        Returns:
            New value, or None when the counter row does not exist yet
        """
        stmt = (
            update(CounterModel)
            .where(CounterModel.name == name)
            .values(value=CounterModel.value + 1, updated_at=utc_now())
            .returning(CounterModel.value)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_at_one(self, session: AsyncSession, name: str) -> bool:
        """
        Insert a counter row with value 1.

        Returns:
            False if another writer created the row first
        """
        try:
            async with session.begin_nested():
                session.add(CounterModel(name=name, value=1))
        except IntegrityError:
            return False
        return True

    async def get_value(self, session: AsyncSession, name: str) -> int:
        """Current value of a counter (0 when missing)."""
        counter = await self.get_by_id(session, name)
        return counter.value if counter else 0


counter_crud = CounterCRUD()
