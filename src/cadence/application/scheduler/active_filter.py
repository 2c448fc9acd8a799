"""
Active-queue filter: the part of the ranking surfaced to the user today.

This is a pure computation module with no I/O.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone, tzinfo

from cadence.application.scheduler.queue_builder import group_attempts_by_problem
from cadence.application.utils.dates import local_day
from cadence.domain.practice.models import Attempt, TaskQueueItem

logger = logging.getLogger(__name__)


def filter_active(
    queue: Iterable[TaskQueueItem],
    attempts: Iterable[Attempt],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> list[TaskQueueItem]:
    """
    Narrow a ranked queue to the items needing attention now.

    Relative order is preserved. A problem is kept when:
    - it was not attempted today without a solo solve, and
    - it was never solved, or its next review date has arrived.

    Args:
        queue: A ranked queue from build_queue.
        attempts: The same attempt history the queue was built from.
        now: The same instant the queue was built with.
        tz: Reference timezone for "today".
    """
    queue = list(queue)
    today = local_day(now, tz)
    attempts_by_problem = group_attempts_by_problem(
        attempts, {item.problem.id for item in queue}
    )

    active: list[TaskQueueItem] = []
    suppressed = 0

    for item in queue:
        todays_attempts = [
            a
            for a in attempts_by_problem.get(item.problem.id, [])
            if local_day(a.date, tz) == today
        ]

        # Already worked on today without a solo solve: back tomorrow.
        if any(not a.solved_solo for a in todays_attempts):
            suppressed += 1
            continue

        if item.solved_count == 0:
            active.append(item)
            continue

        if item.next_review_date is not None and today >= item.next_review_date:
            active.append(item)

    logger.debug(
        f"[queue] Active {len(active)}/{len(queue)} "
        f"(suppressed {suppressed} attempted today)"
    )
    return active
