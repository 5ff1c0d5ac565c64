"""
Query log implementations.

Dependencies: sqlalchemy, docqa.boundary.db
System role: Append-only log of answered queries behind the QueryLogger interface
"""

import logging
from collections import deque
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import async_sessionmaker

from docqa.boundary.db.CRUD.query_log_crud import query_log_crud
from docqa.boundary.interfaces import QueryLogger
from docqa.boundary.stats.schemas import QueryLogEntry

logger = logging.getLogger(__name__)


class InMemoryQueryLogger(QueryLogger):
    """Bounded in-process query log; oldest entries are evicted first."""

    def __init__(self, max_entries: int = 1000) -> None:
        self._entries: deque[QueryLogEntry] = deque(maxlen=max_entries)

    async def record(
        self,
        query: str,
        answer: str,
        chunks_retrieved: int,
        duration_ms: int,
    ) -> None:
        self._entries.append(
            QueryLogEntry(
                timestamp=datetime.now(timezone.utc),
                query=query,
                answer=answer,
                chunks_retrieved=chunks_retrieved,
                duration_ms=duration_ms,
            )
        )

    async def recent(self, limit: int = 50) -> list[QueryLogEntry]:
        return list(reversed(self._entries))[:limit]


class SQLQueryLogger(QueryLogger):
    """Query log persisted in the query_logs table."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def record(
        self,
        query: str,
        answer: str,
        chunks_retrieved: int,
        duration_ms: int,
    ) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await query_log_crud.create(
                    session,
                    query=query,
                    answer=answer,
                    chunks_retrieved=chunks_retrieved,
                    duration_ms=duration_ms,
                )
        logger.debug(
            f"{__name__}:record - Query logged",
            extra={"chunks_retrieved": chunks_retrieved, "duration_ms": duration_ms},
        )

    async def recent(self, limit: int = 50) -> list[QueryLogEntry]:
        async with self._session_factory() as session:
            rows = await query_log_crud.get_recent(session, limit=limit)
        return [
            QueryLogEntry(
                timestamp=_as_utc(row.created_at),
                query=row.query,
                answer=row.answer,
                chunks_retrieved=row.chunks_retrieved,
                duration_ms=row.duration_ms,
            )
            for row in rows
        ]


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on DateTime(timezone=True) columns
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)

