"""
Queue builder for spaced-repetition practice sessions.

Builds a total ordering of the problem catalog by:
1. Grouping the user's attempts per problem (orphans are dropped)
2. Classifying each problem (never attempted, unsolved, due, overdue, upcoming)
3. Scoring it as base difficulty priority + situational weight
4. Sorting by (priority, problem id)
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime, timezone, tzinfo

from cadence.application.scheduler.intervals import next_review_date
from cadence.application.utils.dates import days_between, local_day, localize
from cadence.domain.constants import (
    ATTEMPTED_NOT_SOLVED_WEIGHT,
    DIFFICULTY_PRIORITY,
    DUE_TODAY_WEIGHT,
    NEVER_ATTEMPTED_WEIGHT,
    OVERDUE_WEIGHT,
    UPCOMING_WEIGHT,
)
from cadence.domain.practice.models import (
    Attempt,
    Problem,
    QueueReason,
    ReasonKind,
    TaskQueueItem,
)

logger = logging.getLogger(__name__)


def build_queue(
    problems: Iterable[Problem],
    attempts: Iterable[Attempt],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> list[TaskQueueItem]:
    """
    Score and sort every problem in the catalog.

    Args:
        problems: The full problem catalog.
        attempts: One user's attempt history, in any order.
        now: The instant captured once for this request.
        tz: Reference timezone for calendar-day boundaries.

    Returns:
        One TaskQueueItem per problem, most urgent first.
    """
    problems = list(problems)
    today = local_day(now, tz)
    attempts_by_problem = group_attempts_by_problem(attempts, {p.id for p in problems})

    queue = [
        _score_problem(problem, attempts_by_problem.get(problem.id, []), today, tz)
        for problem in problems
    ]
    queue.sort(key=lambda item: (item.priority, item.problem.id))

    logger.debug(f"[queue] Scored {len(queue)} problems for {today.isoformat()}")
    return queue


def group_attempts_by_problem(
    attempts: Iterable[Attempt],
    known_problem_ids: set[str],
) -> dict[str, list[Attempt]]:
    """
    Bucket attempts per problem id.

    Attempts for problems missing from the catalog (deleted out-of-band)
    are skipped.
    """
    grouped: dict[str, list[Attempt]] = defaultdict(list)
    orphans = 0

    for attempt in attempts:
        if attempt.problem_id not in known_problem_ids:
            orphans += 1
            continue
        grouped[attempt.problem_id].append(attempt)

    if orphans:
        logger.debug(f"[queue] Ignored {orphans} attempt(s) for unknown problems")
    return grouped


def classify(
    has_attempts: bool,
    solved_count: int,
    review_date: date | None,
    today: date,
) -> QueueReason:
    """
    Place a problem in exactly one scheduling class.
    """
    if solved_count == 0:
        if not has_attempts:
            return QueueReason.never_attempted()
        return QueueReason.attempted_not_solved()

    if review_date is None:
        raise ValueError("Solved problems must have a next review date")

    days_overdue = days_between(review_date, today)
    if days_overdue > 0:
        return QueueReason.overdue(days_overdue)
    if days_overdue == 0:
        return QueueReason.due_today()
    return QueueReason.upcoming(-days_overdue)


def situational_weight(reason: QueueReason) -> int:
    if reason.kind is ReasonKind.NEVER_ATTEMPTED:
        return NEVER_ATTEMPTED_WEIGHT
    if reason.kind is ReasonKind.ATTEMPTED_NOT_SOLVED:
        return ATTEMPTED_NOT_SOLVED_WEIGHT
    if reason.kind is ReasonKind.DUE_TODAY:
        return DUE_TODAY_WEIGHT
    if reason.kind is ReasonKind.OVERDUE:
        # More overdue = more urgent. Unclamped.
        return OVERDUE_WEIGHT - reason.days
    return UPCOMING_WEIGHT


def _score_problem(
    problem: Problem,
    problem_attempts: list[Attempt],
    today: date,
    tz: tzinfo,
) -> TaskQueueItem:
    """
    Compute the scheduling metadata for a single problem.
    """
    solved = [a for a in problem_attempts if a.solved_solo]
    solved_count = len(solved)
    last_attempt = _latest(problem_attempts, tz)

    review_date: date | None = None
    days_since_last_solved: int | None = None

    if solved_count:
        last_solved_day = local_day(_latest(solved, tz).date, tz)
        review_date = next_review_date(problem.difficulty, solved_count, last_solved_day)
        days_since_last_solved = days_between(last_solved_day, today)

    reason = classify(bool(problem_attempts), solved_count, review_date, today)
    priority = DIFFICULTY_PRIORITY[problem.difficulty] + situational_weight(reason)

    return TaskQueueItem(
        problem=problem,
        priority=priority,
        reason=reason,
        solved_count=solved_count,
        last_attempt=last_attempt,
        next_review_date=review_date,
        days_since_last_solved=days_since_last_solved,
    )


def _latest(attempts: list[Attempt], tz: tzinfo) -> Attempt | None:
    """
    Most recent attempt by date; equal dates fall back to the greatest id.
    """
    if not attempts:
        return None
    return max(attempts, key=lambda a: (localize(a.date, tz), a.id))
