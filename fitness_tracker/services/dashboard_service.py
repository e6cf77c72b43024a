"""Today's summary: workouts logged today plus step-based estimates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from loguru import logger
from sqlalchemy.orm import Session

from fitness_tracker.integrations.health.steps import StepCountProvider, StepCountResult
from fitness_tracker.metrics.aggregation import sort_by_date, sum_calories, sum_distance, todays_workouts
from fitness_tracker.metrics.step_estimates import steps_goal_progress, steps_to_calories_kcal, steps_to_distance_km
from fitness_tracker.models.records import UserProfile, WorkoutRecord
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.workout_repository import WorkoutRepository
from fitness_tracker.utils.timezone import now_local, start_of_day


@dataclass
class TodaySummary:
    profile: UserProfile
    day_start: datetime
    workouts: list[WorkoutRecord] = field(default_factory=list)
    workout_distance_km: float = 0.0
    workout_calories_kcal: float = 0.0
    step_result: StepCountResult | None = None
    step_distance_km: float = 0.0
    step_calories_kcal: float = 0.0
    steps_goal_progress: float = 0.0


async def build_today_summary(
    session: Session,
    profile_id: str | None,
    provider: StepCountProvider,
    now: datetime | None = None,
) -> TodaySummary:
    """Collect today's workouts and step estimates for one profile.

    A missing profile falls back to the default profile. Denied or
    unavailable step data counts as 0 steps for the estimates; the status is
    kept on the summary.

    Args:
        session: Database session
        profile_id: Active profile id (None uses the default profile)
        provider: Source of today's step count
        now: Current time; defaults to the local clock

    Returns:
        TodaySummary for the local day containing `now`
    """
    profile = ProfileRepository.get_or_default(session, profile_id)
    day_start = start_of_day(now or now_local())

    workouts = sort_by_date(todays_workouts(WorkoutRepository.list_all(session), day_start))
    step_result = await provider.current_steps_today(day_start.date())
    steps = step_result.steps if step_result.ok else 0
    if not step_result.ok:
        logger.info(f"Step count {step_result.status.value}, using 0 steps for estimates")

    return TodaySummary(
        profile=profile,
        day_start=day_start,
        workouts=workouts,
        workout_distance_km=sum_distance(workouts),
        workout_calories_kcal=sum_calories(workouts, profile),
        step_result=step_result,
        step_distance_km=steps_to_distance_km(steps),
        step_calories_kcal=steps_to_calories_kcal(steps, profile.weight_kg),
        steps_goal_progress=steps_goal_progress(steps, profile.daily_steps_goal),
    )
