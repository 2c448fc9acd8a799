# Application Scheduler Package
from .active_filter import filter_active
from .intervals import next_review_date, review_interval
from .queue_builder import build_queue
from .service import TaskQueueService, TaskQueueSnapshot
from .stats_aggregator import summarize

__all__ = [
    "build_queue",
    "filter_active",
    "summarize",
    "next_review_date",
    "review_interval",
    "TaskQueueService",
    "TaskQueueSnapshot",
]
