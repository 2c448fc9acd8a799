import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from cadence.application.config import load_timezone, resolve_config
from cadence.application.schemas import AttemptRecord, ProblemRecord, serialize_snapshot
from cadence.application.scheduler import TaskQueueService
from cadence.consts import VERSION
from cadence.infrastructure.adapters.practice import (
    InMemoryPracticeRepository,
    PracticeDataError,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = resolve_config()
    source = config.data_file or "request bodies only"
    logger.info(f"Task queue API v{VERSION} up (tz={config.timezone}, data={source})")
    yield
    logger.info("Task queue API stopped")


app = FastAPI(
    title="cadence",
    description="Ranks coding problems by spaced-repetition urgency.",
    version=VERSION,
    lifespan=lifespan,
)


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check for process supervisors."""
    return HealthResponse(
        status="ok", version=VERSION, uptime_seconds=round(time.monotonic() - STARTED_AT, 3)
    )


@app.get("/version")
async def get_version():
    return {"version": VERSION}


# Problems and attempts arrive already scoped to one user by the caller.
class TaskQueueRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    problems: list[ProblemRecord] = Field(default_factory=list)
    attempts: list[AttemptRecord] = Field(default_factory=list)
    now: datetime | None = None
    timezone: str | None = None
    active_only: bool = Field(default=True, alias="activeOnly")


@app.post("/task-queue")
async def compute_task_queue(req: TaskQueueRequest):
    """
    Rank the given problems against the given attempt history.
    """
    try:
        tz = load_timezone(req.timezone) if req.timezone else resolve_config().tzinfo
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    repo = InMemoryPracticeRepository(
        [p.to_domain() for p in req.problems],
        [a.to_domain() for a in req.attempts],
    )

    try:
        snapshot = await TaskQueueService(repo, tz=tz).get_snapshot(
            active_only=req.active_only, now=req.now
        )
    except Exception as e:
        logger.error(f"Task queue failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate task queue") from e

    return serialize_snapshot(snapshot)


@app.get("/task-queue")
async def get_task_queue(active_only: bool = True):
    """
    Rank the configured practice data file (CADENCE_DATA_FILE).
    """
    from cadence.application.factory import get_practice_repository

    try:
        config = resolve_config()
        repo = get_practice_repository(config)
        snapshot = await TaskQueueService(repo, tz=config.tzinfo).get_snapshot(
            active_only=active_only
        )
    except PracticeDataError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Task queue failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate task queue") from e

    return serialize_snapshot(snapshot)
