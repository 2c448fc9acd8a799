"""Centralized scheduling constants.

All review intervals and priority weights live here so the engine,
the service layer and the tests read from a single source of truth.
"""

from cadence.domain.practice.models import Difficulty

# ---------- Review intervals (days, indexed by solved-solo count) ----------
REVIEW_INTERVALS: dict[Difficulty, tuple[int, ...]] = {
    Difficulty.EASY: (5, 10, 30, 30, 50, 50),
    Difficulty.MEDIUM: (3, 5, 10, 20, 30, 40, 50, 50),
    Difficulty.HARD: (3, 5, 10, 20, 30, 40, 50, 50),
}

# ---------- Priority (lower = more urgent) ----------
DIFFICULTY_PRIORITY: dict[Difficulty, int] = {
    Difficulty.EASY: 100,
    Difficulty.MEDIUM: 200,
    Difficulty.HARD: 300,
}

NEVER_ATTEMPTED_WEIGHT = 1000
ATTEMPTED_NOT_SOLVED_WEIGHT = 900
OVERDUE_WEIGHT = 850  # minus days overdue, unclamped
DUE_TODAY_WEIGHT = 800
UPCOMING_WEIGHT = 400

# ---------- Presentation ----------
DEFAULT_DISPLAY_LIMIT = 20
UNKNOWN_TOPIC = "Unknown"
