"""
Calendar-day helpers for the scheduler.

Every "same day" or "days between" question is answered on calendar dates in
a single reference timezone, never on raw timestamp differences.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo


def capture_now(tz: tzinfo = timezone.utc) -> datetime:
    """Read the wall clock once; callers thread the result through the pipeline."""
    return datetime.now(tz)


def localize(moment: datetime, tz: tzinfo) -> datetime:
    """
    Express a timestamp in the reference timezone.

    Naive timestamps are taken to already be wall-clock time in `tz`.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def local_day(moment: datetime | date, tz: tzinfo) -> date:
    """Calendar day of `moment` in `tz`. Plain dates are returned unchanged."""
    if isinstance(moment, datetime):
        return localize(moment, tz).date()
    return moment


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from `start` to `end` (negative if `end` is earlier)."""
    return (end - start).days
