"""
Tests for StatsService.

System role: Verification of the stats read model
"""

import pytest

from docqa.application.services.stats_service import StatsService


@pytest.mark.asyncio
async def test_stats_should_be_empty_initially(counter, query_logger) -> None:
    stats = await StatsService(counter, query_logger).get_stats()

    assert stats.total_queries == 0
    assert stats.last_query_time is None
    assert stats.query_logs == []


@pytest.mark.asyncio
async def test_stats_should_combine_counter_and_logs(counter, query_logger) -> None:
    await counter.increment()
    await query_logger.record("first", "a", 1, 10)
    await query_logger.record("second", "b", 2, 20)

    stats = await StatsService(counter, query_logger).get_stats()

    assert stats.total_queries == 1
    assert [entry.query for entry in stats.query_logs] == ["second", "first"]
    assert stats.last_query_time == stats.query_logs[0].timestamp


@pytest.mark.asyncio
async def test_stats_should_limit_logs(counter, query_logger) -> None:
    for i in range(5):
        await query_logger.record(f"q{i}", "a", 0, 0)

    stats = await StatsService(counter, query_logger, log_limit=3).get_stats()

    assert len(stats.query_logs) == 3
