"""Queue statistics for the dashboard."""

from collections.abc import Iterable

from cadence.domain.practice.models import QueueStats, ReasonKind, TaskQueueItem


def summarize(queue: Iterable[TaskQueueItem]) -> QueueStats:
    """
    Count a queue by difficulty and by scheduling class.

    Upcoming items count toward the total and the difficulty histogram only.
    """
    stats = QueueStats()

    for item in queue:
        stats.total += 1
        stats.by_difficulty[item.problem.difficulty] += 1

        kind = item.reason.kind
        if kind is ReasonKind.NEVER_ATTEMPTED:
            stats.never_attempted += 1
        elif kind is ReasonKind.ATTEMPTED_NOT_SOLVED:
            stats.attempted_not_solved += 1
        elif kind is ReasonKind.OVERDUE:
            stats.overdue += 1
        elif kind is ReasonKind.DUE_TODAY:
            stats.due_for_review += 1

    return stats
