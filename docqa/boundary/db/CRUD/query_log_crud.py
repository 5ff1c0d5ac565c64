"""
Query log CRUD operations.

Dependencies: sqlalchemy
System role: Query log persistence
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from docqa.boundary.db.CRUD.base_crud import BaseCRUD
from docqa.boundary.db.models.query_log_model import QueryLogModel


class QueryLogCRUD(BaseCRUD[QueryLogModel]):
    """CRUD operations for query log entries."""

    def __init__(self) -> None:
        super().__init__(QueryLogModel)

    async def get_recent(self, session: AsyncSession, limit: int = 50) -> Sequence[QueryLogModel]:
        """
        Most recent query log entries.

        Args:
            session: Async database session
            limit: Maximum rows to return

        Returns:
            Entries ordered newest first
        """
        return await self.list_ordered(session, QueryLogModel.created_at.desc(), limit)


query_log_crud = QueryLogCRUD()
