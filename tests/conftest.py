from datetime import datetime, timedelta, timezone

import pytest

from cadence.domain.practice.models import Attempt, Difficulty, Problem

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """A fixed evaluation instant: 2026-03-15 12:00 UTC."""
    return NOW


@pytest.fixture
def make_problem():
    def _make(pid: str, difficulty: str = "easy", title: str | None = None) -> Problem:
        return Problem(
            id=pid,
            title=title or f"Problem {pid}",
            url=f"https://leetcode.com/problems/{pid}",
            difficulty=Difficulty(difficulty),
            topic_name="Arrays",
        )

    return _make


@pytest.fixture
def make_attempt():
    """Attempts dated relative to NOW (whole days back, same time of day)."""
    counter = iter(range(1, 10_000))

    def _make(
        problem_id: str,
        days_ago: int = 0,
        solved: bool = True,
        attempt_id: str | None = None,
        time_spent: int = 30,
    ) -> Attempt:
        return Attempt(
            id=attempt_id or f"att-{next(counter):04d}",
            problem_id=problem_id,
            date=NOW - timedelta(days=days_ago),
            solved_solo=solved,
            time_spent=time_spent,
        )

    return _make


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Isolates config lookup from the real home directory."""
    home = tmp_path / "home"
    home.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(
        "cadence.application.config.CONFIG_FILES",
        [home / ".config/cadence/config.toml", home / ".cadence.toml"],
    )
    for var in ("CADENCE_DATA_FILE", "CADENCE_TIMEZONE", "CADENCE_DISPLAY_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    return home
