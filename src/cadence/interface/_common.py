"""Shared helpers for CLI commands."""

import asyncio
import logging
from datetime import datetime
from typing import Any

import typer

from cadence.application.config import AppConfig, resolve_config
from cadence.application.factory import get_practice_repository
from cadence.application.scheduler import TaskQueueService, TaskQueueSnapshot
from cadence.infrastructure.adapters.practice import PracticeDataError

logger = logging.getLogger(__name__)

NOW_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]


def _resolve_with_overrides(**overrides: Any) -> AppConfig:
    """Resolve config, turning validation problems into a clean CLI exit."""
    try:
        return resolve_config(overrides)
    except ValueError as e:
        typer.secho(f"Invalid configuration: {e}", fg="red", err=True)
        raise typer.Exit(2) from e


def _load_snapshot(
    config: AppConfig, active_only: bool, now: datetime | None
) -> TaskQueueSnapshot:
    """Run the scheduler against the configured data file."""
    if config.data_file is None:
        typer.secho(
            "No data file given. Pass one as an argument or set CADENCE_DATA_FILE.",
            fg="yellow",
            err=True,
        )
        raise typer.Exit(2)

    service = TaskQueueService(get_practice_repository(config), tz=config.tzinfo)
    try:
        return asyncio.run(service.get_snapshot(active_only=active_only, now=now))
    except PracticeDataError as e:
        logger.debug("Failed to load practice data", exc_info=True)
        typer.secho(str(e), fg="red", err=True)
        raise typer.Exit(1) from e
