"""
Agent statistics service.

Combines the query counter with the most recent query log entries.

Dependencies: docqa.boundary.interfaces
System role: Stats read model for the HTTP boundary
"""

import logging
from datetime import datetime

from pydantic import BaseModel, Field

from docqa.boundary.interfaces import CounterService, QueryLogger
from docqa.boundary.stats.schemas import QueryLogEntry

logger = logging.getLogger(__name__)


class AgentStats(BaseModel):
    """Snapshot of query statistics."""

    total_queries: int = Field(description="Current query counter value")
    last_query_time: datetime | None = Field(default=None, description="Timestamp of the newest log entry")
    query_logs: list[QueryLogEntry] = Field(default_factory=list, description="Newest first")


class StatsService:
    """Read-only view over the counter and the query log."""

    def __init__(
        self,
        counter: CounterService,
        query_logger: QueryLogger,
        log_limit: int = 50,
    ) -> None:
        self._counter = counter
        self._query_logger = query_logger
        self._log_limit = log_limit

    async def get_stats(self) -> AgentStats:
        total = await self._counter.current()
        logs = await self._query_logger.recent(limit=self._log_limit)
        last_query_time = max((entry.timestamp for entry in logs), default=None)

        logger.info(
            f"{__name__}:get_stats - Loaded stats",
            extra={"total_queries": total, "log_count": len(logs)},
        )
        return AgentStats(
            total_queries=total,
            last_query_time=last_query_time,
            query_logs=logs,
        )
