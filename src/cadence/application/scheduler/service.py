"""
Task Queue Service: Application layer orchestrator.

Coordinates fetching practice data from the repository and running the
scheduler pipeline: build -> filter -> summarize.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from cadence.application.utils.dates import capture_now, localize
from cadence.domain.practice.models import QueueStats, TaskQueueItem
from cadence.domain.practice.ports import PracticeRepository

from .active_filter import filter_active
from .queue_builder import build_queue
from .stats_aggregator import summarize

logger = logging.getLogger(__name__)


@dataclass
class TaskQueueSnapshot:
    """Result of one scheduling request."""

    items: list[TaskQueueItem]
    stats: QueueStats
    generated_at: datetime  # the single "now" every step agreed on
    active_only: bool


class TaskQueueService:
    """
    Application service for producing a user's practice queue.

    Follows Dependency Inversion: depends on PracticeRepository abstraction,
    not concrete adapter implementations.
    """

    def __init__(
        self,
        repo: PracticeRepository,
        tz: tzinfo = timezone.utc,
        clock: Callable[[tzinfo], datetime] | None = None,
    ):
        """
        Args:
            repo: The repository (port) for fetching problems and attempts.
            tz: Reference timezone for calendar-day boundaries.
            clock: Optional clock override; reads the wall clock if not provided.
        """
        self._repo = repo
        self._tz = tz
        self._clock = clock or capture_now

    async def get_snapshot(
        self,
        active_only: bool = True,
        now: datetime | None = None,
    ) -> TaskQueueSnapshot:
        """
        Build the queue and its statistics.

        Args:
            active_only: Return only the items needing attention today.
            now: Pin the evaluation instant; the clock is read once otherwise.

        Returns:
            TaskQueueSnapshot whose stats describe exactly the returned items.
        """
        now = localize(now, self._tz) if now is not None else self._clock(self._tz)

        problems = await self._repo.get_problems()
        attempts = await self._repo.get_attempts()

        items = build_queue(problems, attempts, now, self._tz)
        if active_only:
            items = filter_active(items, attempts, now, self._tz)

        logger.info(
            f"Task queue: {len(items)} item(s) from {len(problems)} problems, "
            f"{len(attempts)} attempts (active_only={active_only})"
        )
        return TaskQueueSnapshot(
            items=items,
            stats=summarize(items),
            generated_at=now,
            active_only=active_only,
        )

    async def get_full_queue(self, now: datetime | None = None) -> list[TaskQueueItem]:
        """
        The complete ranking, including problems that are not due yet.
        """
        snapshot = await self.get_snapshot(active_only=False, now=now)
        return snapshot.items
