"""Background dispatch of recent foods updates."""

import asyncio
import logging
from dataclasses import dataclass, field
from uuid import UUID

from scale_down.domain.meals import Meal
from scale_down.services.recent_foods import RecentFoodsTracker

logger = logging.getLogger(__name__)


@dataclass
class RecentFoodsWorker:
    """Runs recent foods updates off the request path.

    Updates for the same user are serialized so concurrent meal writes do not
    overwrite each other's read-modify-write cycle. Failures are logged and
    never reach the request that scheduled the update. A user's lock is
    dropped once no update for that user is queued.
    """

    tracker: RecentFoodsTracker
    _locks: dict[UUID, asyncio.Lock] = field(default_factory=dict)
    _waiting: dict[UUID, int] = field(default_factory=dict)
    _tasks: set[asyncio.Task[None]] = field(default_factory=set)

    def dispatch(self, meal: Meal) -> asyncio.Task[None]:
        """Schedule an update for a meal that has already been written."""
        task = asyncio.get_running_loop().create_task(self._run(meal))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every scheduled update to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    @property
    def pending(self) -> int:
        """Number of updates that have not finished yet."""
        return len(self._tasks)

    async def _run(self, meal: Meal) -> None:
        user_id = meal.user_id
        lock = self._locks.setdefault(user_id, asyncio.Lock())
        self._waiting[user_id] = self._waiting.get(user_id, 0) + 1
        try:
            async with lock:
                try:
                    await asyncio.to_thread(self.tracker.update, meal)
                except Exception:
                    logger.exception(
                        "Failed to update recent foods",
                        extra={"user_id": str(user_id), "meal_id": str(meal.id)},
                    )
        finally:
            self._waiting[user_id] -= 1
            if not self._waiting[user_id]:
                del self._waiting[user_id]
                del self._locks[user_id]
