"""Review interval lookups per difficulty tier."""

from datetime import date

from cadence.application.utils.dates import add_days
from cadence.domain.constants import REVIEW_INTERVALS
from cadence.domain.practice.models import Difficulty


def review_interval(difficulty: Difficulty, solved_count: int) -> int:
    """
    Days to wait after the most recent solve.

    The n-th solve uses the n-th table entry; counts past the end of the
    table keep using the last entry.
    """
    if solved_count < 1:
        raise ValueError(f"solved_count must be >= 1, got {solved_count}")

    table = REVIEW_INTERVALS[Difficulty(difficulty)]
    return table[min(solved_count - 1, len(table) - 1)]


def next_review_date(difficulty: Difficulty, solved_count: int, last_solved_day: date) -> date:
    return add_days(last_solved_day, review_interval(difficulty, solved_count))
