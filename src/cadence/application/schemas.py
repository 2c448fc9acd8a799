"""
Boundary schemas: validated input records and JSON-ready output.

Input uses the camelCase field names of the practice tracker's API
(problemId, solvedSolo, timeSpent, topicName); snake_case is accepted too.
"""

from datetime import date as calendar_date
from datetime import datetime, time
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cadence.domain.constants import UNKNOWN_TOPIC
from cadence.domain.practice.models import (
    Attempt,
    Difficulty,
    Problem,
    QueueStats,
    TaskQueueItem,
)


class ProblemRecord(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )

    id: str
    title: str
    url: str = ""
    difficulty: Literal["easy", "medium", "hard"]
    topic_name: str | None = Field(default=None, alias="topicName")

    def to_domain(self) -> Problem:
        return Problem(
            id=self.id,
            title=self.title,
            url=self.url,
            difficulty=Difficulty(self.difficulty),
            topic_name=self.topic_name or UNKNOWN_TOPIC,
        )


class AttemptRecord(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )

    id: str
    problem_id: str = Field(alias="problemId")
    date: datetime
    solved_solo: bool = Field(default=False, alias="solvedSolo")
    time_spent: int = Field(default=0, ge=0, alias="timeSpent")

    @field_validator("date", mode="before")
    @classmethod
    def promote_plain_date(cls, v: Any) -> Any:
        if isinstance(v, calendar_date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min)
        return v

    def to_domain(self) -> Attempt:
        return Attempt(
            id=self.id,
            problem_id=self.problem_id,
            date=self.date,
            solved_solo=self.solved_solo,
            time_spent=self.time_spent,
        )


class PracticeDataset(BaseModel):
    """A problem catalog plus one user's attempts."""

    problems: list[ProblemRecord] = Field(default_factory=list)
    attempts: list[AttemptRecord] = Field(default_factory=list)

    def domain_problems(self) -> list[Problem]:
        return sorted((p.to_domain() for p in self.problems), key=lambda p: p.id)

    def domain_attempts(self) -> list[Attempt]:
        return [a.to_domain() for a in self.attempts]


# ---------- Output ----------


def serialize_attempt(attempt: Attempt) -> dict[str, Any]:
    return {
        "id": attempt.id,
        "problemId": attempt.problem_id,
        "date": attempt.date.isoformat(),
        "solvedSolo": attempt.solved_solo,
        "timeSpent": attempt.time_spent,
    }


def serialize_item(item: TaskQueueItem) -> dict[str, Any]:
    problem = item.problem
    return {
        "problem": {
            "id": problem.id,
            "title": problem.title,
            "url": problem.url,
            "difficulty": problem.difficulty.value,
            "topicName": problem.topic_name,
        },
        "priority": item.priority,
        "reason": item.reason.label,
        "reasonKind": item.reason.kind.value,
        "lastAttempt": serialize_attempt(item.last_attempt) if item.last_attempt else None,
        "solvedCount": item.solved_count,
        "nextReviewDate": item.next_review_date.isoformat() if item.next_review_date else None,
        "daysSinceLastSolved": item.days_since_last_solved,
    }


def serialize_stats(stats: QueueStats) -> dict[str, Any]:
    return {
        "total": stats.total,
        "neverAttempted": stats.never_attempted,
        "attemptedNotSolved": stats.attempted_not_solved,
        "dueForReview": stats.due_for_review,
        "overdue": stats.overdue,
        "byDifficulty": {d.value: n for d, n in stats.by_difficulty.items()},
    }


def serialize_snapshot(snapshot) -> dict[str, Any]:
    return {
        "taskQueue": [serialize_item(item) for item in snapshot.items],
        "stats": serialize_stats(snapshot.stats),
        "generatedAt": snapshot.generated_at.isoformat(),
        "activeOnly": snapshot.active_only,
    }


def format_time_spent(minutes: int) -> str:
    """45 -> '45m', 60 -> '1h', 90 -> '1h 30m'."""
    if minutes < 60:
        return f"{minutes}m"
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m" if mins else f"{hours}h"
