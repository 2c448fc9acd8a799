"""Tests for queue statistics."""

from cadence.application.scheduler.active_filter import filter_active
from cadence.application.scheduler.queue_builder import build_queue
from cadence.application.scheduler.stats_aggregator import summarize
from cadence.domain.practice.models import Difficulty


def test_empty_queue():
    stats = summarize([])

    assert stats.total == 0
    assert stats.never_attempted == stats.attempted_not_solved == 0
    assert stats.due_for_review == stats.overdue == 0
    assert stats.by_difficulty == {Difficulty.EASY: 0, Difficulty.MEDIUM: 0, Difficulty.HARD: 0}


def test_each_class_counted_once(now, make_problem, make_attempt):
    problems = [
        make_problem("never", "easy"),
        make_problem("tried", "medium"),
        make_problem("due", "easy"),
        make_problem("late", "hard"),
        make_problem("later", "hard"),
    ]
    attempts = [
        make_attempt("tried", days_ago=2, solved=False),
        make_attempt("due", days_ago=5),
        make_attempt("late", days_ago=10),
        make_attempt("later", days_ago=1),
    ]

    stats = summarize(build_queue(problems, attempts, now))

    assert stats.total == 5
    assert stats.never_attempted == 1
    assert stats.attempted_not_solved == 1
    assert stats.due_for_review == 1
    assert stats.overdue == 1
    assert stats.by_difficulty == {Difficulty.EASY: 2, Difficulty.MEDIUM: 1, Difficulty.HARD: 2}


def test_upcoming_items_count_only_toward_totals(now, make_problem, make_attempt):
    problems = [make_problem("later", "medium")]
    attempts = [make_attempt("later", days_ago=1)]

    stats = summarize(build_queue(problems, attempts, now))

    assert stats.total == 1
    assert stats.by_difficulty[Difficulty.MEDIUM] == 1
    assert stats.never_attempted + stats.attempted_not_solved == 0
    assert stats.due_for_review + stats.overdue == 0


def test_totals_are_consistent_for_active_queue(now, make_problem, make_attempt):
    problems = [make_problem(f"p{i}", d) for i, d in enumerate(["easy", "medium", "hard"] * 3)]
    attempts = [
        make_attempt("p0", days_ago=0, solved=False),
        make_attempt("p1", days_ago=30),
        make_attempt("p4", days_ago=2),
        make_attempt("p8", days_ago=4, solved=False),
    ]
    queue = build_queue(problems, attempts, now)
    active = filter_active(queue, attempts, now)

    stats = summarize(active)

    assert stats.total == len(active)
    assert sum(stats.by_difficulty.values()) == len(active)
    unsolved = sum(1 for item in active if item.solved_count == 0)
    assert stats.never_attempted + stats.attempted_not_solved <= unsolved
