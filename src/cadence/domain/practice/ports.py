"""
Ports (interfaces) for practice data retrieval.

These define the contract that infrastructure adapters must implement.
Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod

from .models import Attempt, Problem


class PracticeRepository(ABC):
    """
    Port for fetching the problem catalog and one user's attempt history.

    Implementations:
        - FilePracticeRepository: Reads a YAML/JSON export from disk.
        - InMemoryPracticeRepository: Wraps collections already in memory.
    """

    @abstractmethod
    async def get_problems(self) -> list[Problem]:
        """
        Fetch the full problem catalog.

        Returns:
            List of Problem objects, ordered by id.
        """
        pass

    @abstractmethod
    async def get_attempts(self) -> list[Attempt]:
        """
        Fetch the attempt history, already scoped to a single user.

        Returns:
            List of Attempt objects in no particular order.
        """
        pass
