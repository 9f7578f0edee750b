"""App-wide usage counters.

Counters are bumped with a single ``UPDATE ... SET x = x + n`` so that
concurrent requests, across any number of server processes, never lose
increments the way an in-process read-modify-write would.
"""
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.core.timeutil import utcnow
from apps.stats.tables import STATS_ROW_ID, AppStats

logger = logging.getLogger(__name__)

COUNTERS = {
    "total_users": AppStats.total_users,
    "total_analyses": AppStats.total_analyses,
}


class StatsStorage:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_app_stats(self) -> AppStats | None:
        result = await self.session.execute(
            select(AppStats)
            .where(AppStats.id == STATS_ROW_ID)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def ensure_row(self) -> AppStats:
        """Create the counters row if it is missing."""
        stats = await self.get_app_stats()
        if stats is None:
            stats = AppStats(id=STATS_ROW_ID, total_users=0, total_analyses=0)
            self.session.add(stats)
            await self.session.flush()
            logger.info("Initialized app stats row")
        return stats

    async def increment(self, counter: str, by: int = 1) -> None:
        if counter not in COUNTERS:
            raise ValueError(f"Unknown counter: {counter}")
        column = COUNTERS[counter]

        if await self._bump(column, by):
            return

        # Row not seeded yet (normally done by init_db)
        values = {name: 0 for name in COUNTERS}
        values[counter] = by
        try:
            async with self.session.begin_nested():
                self.session.add(AppStats(id=STATS_ROW_ID, **values))
        except IntegrityError:
            # A concurrent request created the row between our UPDATE and INSERT
            logger.debug("Stats row created concurrently, retrying %s", counter)
            await self._bump(column, by)

    async def _bump(self, column, by: int) -> int:
        result = await self.session.execute(
            update(AppStats)
            .where(AppStats.id == STATS_ROW_ID)
            .values({column: column + by, AppStats.updated_at: utcnow()})
        )
        return result.rowcount
