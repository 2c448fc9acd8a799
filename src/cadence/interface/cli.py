"""Cadence CLI: practice queue, stats, config and API server commands."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from cadence.application.config import resolve_config
from cadence.application.schemas import (
    format_time_spent,
    serialize_snapshot,
    serialize_stats,
)
from cadence.domain.practice.models import QueueStats, ReasonKind, TaskQueueItem
from cadence.interface._common import NOW_FORMATS, _load_snapshot, _resolve_with_overrides

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="cadence: spaced-repetition practice queue for coding problems.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

config_app = typer.Typer(help="Manage cadence configuration.")
app.add_typer(config_app, name="config")

REASON_COLORS = {
    ReasonKind.OVERDUE: "red",
    ReasonKind.DUE_TODAY: "yellow",
    ReasonKind.ATTEMPTED_NOT_SOLVED: "bright_yellow",
    ReasonKind.NEVER_ATTEMPTED: "blue",
    ReasonKind.UPCOMING: "white",
}


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Enable debug logging."
        ),
    ] = 0,
):
    """Global settings for cadence."""
    logging.getLogger().setLevel(logging.DEBUG if verbose >= 1 else logging.INFO)


# ---------------------------------------------------------------------------
# Root commands
# ---------------------------------------------------------------------------


@app.command("queue")
def queue(
    data_file: Annotated[
        Path | None,
        typer.Argument(help="YAML/JSON file with problems and attempts. Defaults to config."),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", help="Show the full ranking, including not-yet-due problems."),
    ] = False,
    limit: Annotated[int | None, typer.Option(help="Maximum tasks to print.")] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
    now: Annotated[
        datetime | None,
        typer.Option(formats=NOW_FORMATS, help="Evaluate as of this instant instead of now."),
    ] = None,
    tz_name: Annotated[
        str | None, typer.Option("--timezone", help="Timezone for day boundaries.")
    ] = None,
):
    """Show what to [bold green]practice next[/bold green]."""
    config = _resolve_with_overrides(
        data_file=data_file,
        timezone=tz_name,
        display_limit=limit,
    )
    active_only = config.active_only and not show_all
    snapshot = _load_snapshot(config, active_only=active_only, now=now)

    if json_output:
        typer.echo(json.dumps(serialize_snapshot(snapshot), indent=2))
        return

    _print_stats(snapshot.stats)

    if not snapshot.items:
        typer.secho("\nAll caught up! No problems need your attention right now.", fg="green")
        return

    typer.echo("")
    shown = snapshot.items[: config.display_limit]
    for index, item in enumerate(shown, start=1):
        _print_item(index, item)

    remaining = len(snapshot.items) - len(shown)
    if remaining > 0:
        typer.echo(f"\nShowing top {len(shown)} tasks. {remaining} more in queue.")


@app.command("stats")
def stats(
    data_file: Annotated[
        Path | None,
        typer.Argument(help="YAML/JSON file with problems and attempts. Defaults to config."),
    ] = None,
    show_all: Annotated[
        bool, typer.Option("--all", help="Count the full ranking, not just the active queue.")
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
    now: Annotated[
        datetime | None,
        typer.Option(formats=NOW_FORMATS, help="Evaluate as of this instant instead of now."),
    ] = None,
    tz_name: Annotated[
        str | None, typer.Option("--timezone", help="Timezone for day boundaries.")
    ] = None,
):
    """Summarize the queue by status and difficulty."""
    config = _resolve_with_overrides(data_file=data_file, timezone=tz_name)
    snapshot = _load_snapshot(config, active_only=config.active_only and not show_all, now=now)

    if json_output:
        typer.echo(json.dumps(serialize_stats(snapshot.stats), indent=2))
    else:
        _print_stats(snapshot.stats)


@app.command("serve")
def serve(
    host: Annotated[str | None, typer.Option(help="Host to bind the server to.")] = None,
    port: Annotated[int | None, typer.Option(help="Port to bind the server to.")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload.")] = False,
):
    """Run the task-queue HTTP API."""
    import uvicorn

    config = _resolve_with_overrides(host=host, port=port)
    logger.info(f"Starting API on {config.host}:{config.port}")
    uvicorn.run("cadence.server:app", host=config.host, port=config.port, reload=reload)


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = resolve_config()
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _print_stats(stats: QueueStats) -> None:
    typer.echo(
        f"Total: {stats.total}  Never attempted: {stats.never_attempted}"
        f"  Not solved: {stats.attempted_not_solved}"
        f"  Due today: {stats.due_for_review}  Overdue: {stats.overdue}"
    )
    typer.echo("  ".join(f"{d.value}: {n}" for d, n in stats.by_difficulty.items()))


def _print_item(index: int, item: TaskQueueItem) -> None:
    problem = item.problem
    details = [problem.topic_name]
    if item.solved_count > 0:
        times = "time" if item.solved_count == 1 else "times"
        details.append(f"Solved {item.solved_count} {times}")
    if item.last_attempt:
        details.append(f"Last: {format_time_spent(item.last_attempt.time_spent)}")

    typer.echo(f"#{index:<3} {problem.title}  [{problem.difficulty.value}]")
    typer.echo(f"     {' · '.join(details)}")
    typer.secho(f"     {item.reason.label}", fg=REASON_COLORS[item.reason.kind])
