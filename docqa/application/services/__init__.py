"""Service orchestrators."""

from .query_service import QueryResult, QueryService
from .stats_service import AgentStats, StatsService

__all__ = [
    "AgentStats",
    "QueryResult",
    "QueryService",
    "StatsService",
]
