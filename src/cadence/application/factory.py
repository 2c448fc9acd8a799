"""
Practice Repository Factory
Centralizes the logic for selecting the practice data adapter.
"""

from cadence.application.config import AppConfig
from cadence.domain.practice.ports import PracticeRepository
from cadence.infrastructure.adapters.practice import FilePracticeRepository, PracticeDataError


def get_practice_repository(config: AppConfig) -> PracticeRepository:
    """
    Returns the PracticeRepository for the configured data source.
    """
    if config.data_file is None:
        raise PracticeDataError(
            "No practice data configured. Pass a data file or set CADENCE_DATA_FILE."
        )
    return FilePracticeRepository(config.data_file)
