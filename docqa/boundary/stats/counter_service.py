"""
Query counter implementations.

InMemoryCounterService serialises increments behind an asyncio lock
(single-process deployments and tests). SQLCounterService relies on a single
UPDATE ... RETURNING statement so increments stay atomic across workers.

Dependencies: sqlalchemy, docqa.boundary.db
System role: Shared query counter behind the CounterService interface
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from docqa.boundary.db.CRUD.counter_crud import counter_crud
from docqa.boundary.interfaces import CounterService

logger = logging.getLogger(__name__)

QUERY_COUNTER = "queries"


class InMemoryCounterService(CounterService):
    """Process-local counter."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = asyncio.Lock()

    async def increment(self) -> int:
        async with self._lock:
            self._value += 1
            return self._value

    async def current(self) -> int:
        return self._value


class SQLCounterService(CounterService):
    """
    Counter persisted in the counters table.

    Attributes:
        name: Counter row name
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        name: str = QUERY_COUNTER,
        max_create_attempts: int = 3,
    ) -> None:
        self._session_factory = session_factory
        self.name = name
        self._max_create_attempts = max_create_attempts

    async def increment(self) -> int:
        """
        Atomically increment the counter.

        The first increment creates the row. If a concurrent writer creates it
        first, the increment is retried as an UPDATE.

        Returns:
            int: New counter value
        """
        for attempt in range(1, self._max_create_attempts + 1):
            async with self._session_factory() as session:
                async with session.begin():
                    value = await counter_crud.increment(session, self.name)
                    if value is not None:
                        return value
                    if await counter_crud.create_at_one(session, self.name):
                        logger.info(
                            f"{__name__}:increment - Created counter row",
                            extra={"counter": self.name},
                        )
                        return 1
            logger.debug(
                f"{__name__}:increment - Counter row created concurrently, retrying",
                extra={"counter": self.name, "attempt": attempt},
            )

        raise RuntimeError(f"Could not increment counter '{self.name}'")

    async def current(self) -> int:
        async with self._session_factory() as session:
            return await counter_crud.get_value(session, self.name)
