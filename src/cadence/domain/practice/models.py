"""
Domain models for practice scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Problem:
    """
    A practice problem from the catalog.

    Display fields (title, url, topic_name) are carried through unchanged.
    Unknown difficulty values raise ValueError on construction.
    """

    id: str
    title: str
    url: str
    difficulty: Difficulty
    topic_name: str = "Unknown"

    def __post_init__(self):
        object.__setattr__(self, "difficulty", Difficulty(self.difficulty))


@dataclass(frozen=True)
class Attempt:
    """
    A single attempt at a problem by the current user.

    Attributes:
        id: Attempt identifier, used as the secondary ordering key.
        problem_id: The problem this attempt belongs to.
        date: When the attempt happened. Naive values are read in the
            scheduler's reference timezone; a plain date means midnight.
        solved_solo: True when the problem was solved without help.
        time_spent: Minutes spent (informational, never scored).
    """

    id: str
    problem_id: str
    date: datetime
    solved_solo: bool = False
    time_spent: int = 0

    def __post_init__(self):
        if isinstance(self.date, datetime):
            return
        if isinstance(self.date, date):
            object.__setattr__(self, "date", datetime.combine(self.date, time.min))
            return
        raise TypeError(f"Attempt {self.id!r} has no valid date: {self.date!r}")


class ReasonKind(str, Enum):
    NEVER_ATTEMPTED = "never_attempted"
    ATTEMPTED_NOT_SOLVED = "attempted_not_solved"
    DUE_TODAY = "due_today"
    OVERDUE = "overdue"
    UPCOMING = "upcoming"


def _plural_days(days: int) -> str:
    return f"{days} day" if days == 1 else f"{days} days"


@dataclass(frozen=True)
class QueueReason:
    """
    Why a problem sits where it does in the queue.

    `kind` drives aggregation; `label` is only for display.
    `days` is set for OVERDUE (days past due) and UPCOMING (days until due).
    """

    kind: ReasonKind
    days: int | None = None

    @classmethod
    def never_attempted(cls) -> "QueueReason":
        return cls(ReasonKind.NEVER_ATTEMPTED)

    @classmethod
    def attempted_not_solved(cls) -> "QueueReason":
        return cls(ReasonKind.ATTEMPTED_NOT_SOLVED)

    @classmethod
    def due_today(cls) -> "QueueReason":
        return cls(ReasonKind.DUE_TODAY)

    @classmethod
    def overdue(cls, days: int) -> "QueueReason":
        return cls(ReasonKind.OVERDUE, days)

    @classmethod
    def upcoming(cls, days: int) -> "QueueReason":
        return cls(ReasonKind.UPCOMING, days)

    @property
    def label(self) -> str:
        if self.kind is ReasonKind.NEVER_ATTEMPTED:
            return "Never attempted"
        if self.kind is ReasonKind.ATTEMPTED_NOT_SOLVED:
            return "Attempted but not solved"
        if self.kind is ReasonKind.DUE_TODAY:
            return "Due for review today"
        if self.kind is ReasonKind.OVERDUE:
            return f"Review overdue by {_plural_days(self.days)}"
        return f"Next review in {_plural_days(self.days)}"

    @property
    def is_due(self) -> bool:
        return self.kind in (ReasonKind.DUE_TODAY, ReasonKind.OVERDUE)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class TaskQueueItem:
    """
    A problem paired with its computed scheduling metadata.

    Derived on every request; never stored.
    """

    problem: Problem
    priority: int
    reason: QueueReason
    solved_count: int = 0
    last_attempt: Attempt | None = None
    next_review_date: date | None = None  # set iff solved_count >= 1
    days_since_last_solved: int | None = None


@dataclass
class QueueStats:
    """Aggregate counts over a queue, for dashboard display."""

    total: int = 0
    never_attempted: int = 0
    attempted_not_solved: int = 0
    due_for_review: int = 0
    overdue: int = 0
    by_difficulty: dict[Difficulty, int] = field(
        default_factory=lambda: {d: 0 for d in Difficulty}
    )
