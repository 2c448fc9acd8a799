"""
File Practice Repository: Infrastructure adapter for YAML/JSON exports.

Implements PracticeRepository by reading a single document of the form:

    problems:
      - {id, title, url, difficulty, topicName}
    attempts:
      - {id, problemId, date, solvedSolo, timeSpent}

JSON is valid YAML, so both formats go through the same loader.
"""

import logging
from pathlib import Path

import yaml  # type: ignore
from pydantic import ValidationError

from cadence.application.schemas import PracticeDataset
from cadence.domain.practice.models import Attempt, Problem
from cadence.domain.practice.ports import PracticeRepository

logger = logging.getLogger(__name__)


class PracticeDataError(Exception):
    """Raised when a practice data source is missing or malformed."""


class FilePracticeRepository(PracticeRepository):
    """
    Reads problems and attempts from a YAML or JSON file.

    The file is parsed lazily on first access and cached for the
    lifetime of the repository.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._dataset: PracticeDataset | None = None

    async def get_problems(self) -> list[Problem]:
        return self._load().domain_problems()

    async def get_attempts(self) -> list[Attempt]:
        return self._load().domain_attempts()

    def _load(self) -> PracticeDataset:
        if self._dataset is not None:
            return self._dataset

        if not self.path.is_file():
            raise PracticeDataError(f"Practice data file not found: {self.path}")

        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise PracticeDataError(f"Could not parse {self.path.name}: {e}") from e

        if not isinstance(raw, dict):
            raise PracticeDataError(
                f"{self.path.name}: expected a mapping with 'problems' and 'attempts'"
            )

        try:
            self._dataset = PracticeDataset.model_validate(raw)
        except ValidationError as e:
            raise PracticeDataError(f"Invalid practice data in {self.path.name}:\n{e}") from e

        logger.debug(
            f"[data] Loaded {len(self._dataset.problems)} problems and "
            f"{len(self._dataset.attempts)} attempts from {self.path}"
        )
        return self._dataset
