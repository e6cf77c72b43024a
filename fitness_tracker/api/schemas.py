"""Request and response schemas for the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from fitness_tracker.integrations.health.steps import StepCountStatus
from fitness_tracker.metrics.workout_metrics import compute_workout_metrics
from fitness_tracker.models.records import Gender, UserProfile, WorkoutRecord
from fitness_tracker.services.dashboard_service import TodaySummary
from fitness_tracker.utils.formatting import format_minutes


class WorkoutMetricsResponse(BaseModel):
    walking_duration_minutes: float
    running_distance_km: float
    walking_distance_km: float
    total_distance_km: float
    average_speed_kmh: float
    calories_kcal: float | None = Field(default=None, description="Only present when a profile is given")


class WorkoutResponse(BaseModel):
    id: str
    date: datetime
    total_duration_minutes: float
    running_duration_minutes: float
    running_speed_kmh: float
    walking_speed_kmh: float
    total_duration_display: str = Field(description="Total duration as HH:MM")
    running_duration_display: str
    walking_duration_display: str
    metrics: WorkoutMetricsResponse

    @classmethod
    def from_record(cls, record: WorkoutRecord, profile: UserProfile | None = None) -> WorkoutResponse:
        metrics = compute_workout_metrics(record, profile)
        return cls(
            id=record.id,
            date=record.date,
            total_duration_minutes=record.total_duration_minutes,
            running_duration_minutes=record.running_duration_minutes,
            running_speed_kmh=record.running_speed_kmh,
            walking_speed_kmh=record.walking_speed_kmh,
            total_duration_display=format_minutes(record.total_duration_minutes),
            running_duration_display=format_minutes(record.running_duration_minutes),
            walking_duration_display=format_minutes(metrics.walking_duration_minutes),
            metrics=WorkoutMetricsResponse(
                walking_duration_minutes=metrics.walking_duration_minutes,
                running_distance_km=metrics.running_distance_km,
                walking_distance_km=metrics.walking_distance_km,
                total_distance_km=metrics.total_distance_km,
                average_speed_kmh=metrics.average_speed_kmh,
                calories_kcal=metrics.calories_kcal,
            ),
        )


class ProfileRequest(BaseModel):
    """Profile values; omitted fields use the defaults."""

    weight_kg: float = Field(default=70.0, gt=0)
    height_cm: float = Field(default=175.0, gt=0)
    gender: Gender = Field(default=Gender.MALE)
    daily_steps_goal: int = Field(default=10000, gt=0)


class WeightCreateRequest(BaseModel):
    weight_kg: float = Field(gt=0)
    date: datetime | None = Field(default=None, description="Defaults to now")


class WeightUpdateRequest(BaseModel):
    weight_kg: float | None = Field(default=None, gt=0)
    date: datetime | None = None


class StepsResponse(BaseModel):
    status: StepCountStatus
    steps: int
    goal: int
    goal_progress: float
    distance_km: float
    calories_kcal: float


class TodaySummaryResponse(BaseModel):
    profile: UserProfile
    day_start: datetime
    workouts: list[WorkoutResponse]
    workout_distance_km: float
    workout_calories_kcal: float
    steps: StepsResponse

    @classmethod
    def from_summary(cls, summary: TodaySummary) -> TodaySummaryResponse:
        step_result = summary.step_result
        return cls(
            profile=summary.profile,
            day_start=summary.day_start,
            workouts=[WorkoutResponse.from_record(w, summary.profile) for w in summary.workouts],
            workout_distance_km=summary.workout_distance_km,
            workout_calories_kcal=summary.workout_calories_kcal,
            steps=StepsResponse(
                status=step_result.status if step_result else StepCountStatus.UNAVAILABLE,
                steps=step_result.steps if step_result else 0,
                goal=summary.profile.daily_steps_goal,
                goal_progress=summary.steps_goal_progress,
                distance_km=summary.step_distance_km,
                calories_kcal=summary.step_calories_kcal,
            ),
        )
