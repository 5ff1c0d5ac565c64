"""
Agent statistics API models.

Dependencies: pydantic
System role: Response schema for GET /api/agent-stats
"""

from datetime import datetime

from pydantic import Field

from docqa.application.services.stats_service import AgentStats
from docqa.models.common import CamelModel


class QueryLogItem(CamelModel):
    """One query log entry."""

    timestamp: datetime
    query: str
    answer: str
    chunks_retrieved: int
    duration: int = Field(description="Processing time in milliseconds")


class AgentStatsResponse(CamelModel):
    """Counter value plus recent query log, newest first."""

    success: bool = True
    total_queries: int
    last_query_time: datetime | None = None
    query_logs: list[QueryLogItem] = Field(default_factory=list)

    @classmethod
    def from_stats(cls, stats: AgentStats) -> "AgentStatsResponse":
        return cls(
            total_queries=stats.total_queries,
            last_query_time=stats.last_query_time,
            query_logs=[
                QueryLogItem(
                    timestamp=entry.timestamp,
                    query=entry.query,
                    answer=entry.answer,
                    chunks_retrieved=entry.chunks_retrieved,
                    duration=entry.duration_ms,
                )
                for entry in stats.query_logs
            ],
        )
