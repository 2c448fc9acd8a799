# Practice Data Adapters
from .file_repository import FilePracticeRepository, PracticeDataError
from .memory_repository import InMemoryPracticeRepository

__all__ = ["FilePracticeRepository", "InMemoryPracticeRepository", "PracticeDataError"]
