# Domain Practice Package
from .models import (
    Attempt,
    Difficulty,
    Problem,
    QueueReason,
    QueueStats,
    ReasonKind,
    TaskQueueItem,
)
from .ports import PracticeRepository

__all__ = [
    "Attempt",
    "Difficulty",
    "Problem",
    "QueueReason",
    "QueueStats",
    "ReasonKind",
    "TaskQueueItem",
    "PracticeRepository",
]
