"""Command-line interface for the fitness tracker.

Runs the API server, prepares the database, imports step totals and prints
today's summary or the metrics of a single workout.
"""

import asyncio
from datetime import date

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.table import Table

from fitness_tracker.config.settings import settings
from fitness_tracker.core.errors import WorkoutValidationError
from fitness_tracker.core.logger import setup_logger
from fitness_tracker.db.session import get_session, get_session_factory, init_db
from fitness_tracker.integrations.health.steps import StoredStepCountProvider
from fitness_tracker.metrics.workout_metrics import compute_workout_metrics
from fitness_tracker.models.records import WorkoutRecord
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.step_count_repository import StepCountRepository
from fitness_tracker.services.dashboard_service import build_today_summary
from fitness_tracker.utils.formatting import format_minutes
from fitness_tracker.utils.timezone import now_local
from fitness_tracker.workouts.validation import WorkoutInput, validate_workout_input

console = Console()

app = typer.Typer(
    name="fitness-tracker",
    help="Treadmill workout and step tracker",
    add_completion=False,
)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    setup_logger(level="DEBUG" if debug else None)


@app.command()
def server(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("fitness_tracker.main:app", host=host, port=port, reload=reload)


@app.command("init-db")
def init_db_command() -> None:
    """Create missing tables."""
    init_db()
    console.print("[green]Database ready[/green]")


@app.command("record-steps")
def record_steps(
    steps: int = typer.Argument(..., min=0, help="Step total for the day"),
    day: str = typer.Option("", "--day", help="ISO date, defaults to today"),
) -> None:
    """Store a day's step total in the local health store."""
    try:
        target = date.fromisoformat(day) if day else now_local().date()
    except ValueError as e:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got '{day}'", param_hint="--day") from e
    init_db()
    with get_session() as session:
        StepCountRepository.record(session, target, steps)
    console.print(f"Recorded [bold]{steps}[/bold] steps for {target.isoformat()}")


@app.command()
def metrics(
    total: float = typer.Option(..., "--total", help="Total duration in minutes"),
    running: float = typer.Option(0.0, "--running", help="Running duration in minutes"),
    running_speed: float = typer.Option(0.0, "--running-speed", help="Running speed in km/h"),
    walking_speed: float = typer.Option(0.0, "--walking-speed", help="Walking speed in km/h"),
    profile_id: str = typer.Option("", "--profile-id", help="Profile for the calorie estimate"),
) -> None:
    """Compute the metrics of a workout without storing it."""
    try:
        data = validate_workout_input(
            WorkoutInput(
                total_duration_minutes=total,
                running_duration_minutes=running,
                running_speed_kmh=running_speed,
                walking_speed_kmh=walking_speed,
            )
        )
    except WorkoutValidationError as e:
        for error in e.errors:
            console.print(f"[red]{error}[/red]")
        raise typer.Exit(1) from e

    init_db()
    with get_session() as session:
        profile = ProfileRepository.get_or_default(session, profile_id or None)
    result = compute_workout_metrics(WorkoutRecord(**data.model_dump()), profile)

    table = Table(title="Workout metrics")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Walking time", format_minutes(result.walking_duration_minutes))
    table.add_row("Running distance", f"{result.running_distance_km:.2f} km")
    table.add_row("Walking distance", f"{result.walking_distance_km:.2f} km")
    table.add_row("Total distance", f"{result.total_distance_km:.2f} km")
    table.add_row("Average speed", f"{result.average_speed_kmh:.2f} km/h")
    table.add_row("Calories", f"{result.calories_kcal:.0f} kcal")
    console.print(table)


@app.command()
def today(profile_id: str = typer.Option("", "--profile-id", help="Active profile id")) -> None:
    """Print today's workouts and step estimates."""
    init_db()
    provider = StoredStepCountProvider(get_session_factory(), authorized=settings.health_steps_authorized)
    with get_session() as session:
        summary = asyncio.run(build_today_summary(session, profile_id or None, provider))

    table = Table(title=f"Today ({summary.day_start.date().isoformat()})")
    table.add_column("Time")
    table.add_column("Duration", justify="right")
    table.add_column("Distance", justify="right")
    for workout in summary.workouts:
        row_metrics = compute_workout_metrics(workout, summary.profile)
        table.add_row(
            workout.date.astimezone(summary.day_start.tzinfo).strftime("%H:%M"),
            format_minutes(workout.total_duration_minutes),
            f"{row_metrics.total_distance_km:.2f} km",
        )
    console.print(table)
    console.print(f"Workouts: {summary.workout_distance_km:.2f} km, {summary.workout_calories_kcal:.0f} kcal")

    step_result = summary.step_result
    if step_result is not None and step_result.ok:
        console.print(
            f"Steps: {step_result.steps} / {summary.profile.daily_steps_goal} "
            f"({summary.steps_goal_progress:.0%}), {summary.step_distance_km:.2f} km, "
            f"{summary.step_calories_kcal:.0f} kcal"
        )
    else:
        status = step_result.status.value if step_result else "unavailable"
        console.print(f"[yellow]Steps: {status}[/yellow]")


if __name__ == "__main__":
    app()
