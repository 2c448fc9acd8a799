"""
In-Memory Practice Repository: adapter for data already loaded by the caller.

Used by the HTTP API, where the request body carries the collections.
"""

from collections.abc import Iterable

from cadence.domain.practice.models import Attempt, Problem
from cadence.domain.practice.ports import PracticeRepository


class InMemoryPracticeRepository(PracticeRepository):
    def __init__(self, problems: Iterable[Problem], attempts: Iterable[Attempt]):
        self._problems = sorted(problems, key=lambda p: p.id)
        self._attempts = list(attempts)

    async def get_problems(self) -> list[Problem]:
        return list(self._problems)

    async def get_attempts(self) -> list[Attempt]:
        return list(self._attempts)
