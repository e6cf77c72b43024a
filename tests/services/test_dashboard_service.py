"""Tests for the today summary."""

from datetime import UTC, date, datetime

import pytest

from fitness_tracker.db.session import get_session_factory
from fitness_tracker.integrations.health.steps import (
    StaticStepCountProvider,
    StepCountResult,
    StepCountStatus,
    StoredStepCountProvider,
)
from fitness_tracker.models.records import UserProfile, WorkoutRecord
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.step_count_repository import StepCountRepository
from fitness_tracker.repositories.workout_repository import WorkoutRepository
from fitness_tracker.services.dashboard_service import build_today_summary

NOW = datetime(2024, 1, 15, 20, 0, tzinfo=UTC)


@pytest.fixture
def stored_workouts(db_session) -> list[WorkoutRecord]:
    records = [
        WorkoutRecord(date=datetime(2024, 1, 14, 18, 0, tzinfo=UTC), total_duration_minutes=30, running_duration_minutes=0, running_speed_kmh=0, walking_speed_kmh=5.0),
        WorkoutRecord(date=datetime(2024, 1, 15, 7, 0, tzinfo=UTC), total_duration_minutes=45, running_duration_minutes=15, running_speed_kmh=10.0, walking_speed_kmh=5.0),
        WorkoutRecord(date=datetime(2024, 1, 15, 18, 0, tzinfo=UTC), total_duration_minutes=45, running_duration_minutes=15, running_speed_kmh=10.0, walking_speed_kmh=5.0),
    ]
    for record in records:
        WorkoutRepository.create(db_session, record)
    return records


@pytest.mark.asyncio
async def test_summary_for_today(db_session, stored_workouts):
    profile = ProfileRepository.create(db_session, UserProfile(weight_kg=70, daily_steps_goal=8000))

    summary = await build_today_summary(db_session, profile.id, StaticStepCountProvider.with_steps(10000), now=NOW)

    assert [w.id for w in summary.workouts] == [stored_workouts[2].id, stored_workouts[1].id]
    assert summary.workout_distance_km == pytest.approx(10.0)
    assert summary.workout_calories_kcal == pytest.approx(2 * 330.75)
    assert summary.step_result.status == StepCountStatus.SUCCESS
    assert summary.step_distance_km == pytest.approx(7.62)
    assert summary.step_calories_kcal == pytest.approx(350.04375)
    assert summary.steps_goal_progress == pytest.approx(1.25)


@pytest.mark.asyncio
async def test_summary_uses_default_profile_when_missing(db_session, stored_workouts):
    summary = await build_today_summary(db_session, None, StaticStepCountProvider.with_steps(0), now=NOW)
    assert summary.profile.weight_kg == 70.0
    assert summary.workout_calories_kcal == pytest.approx(2 * 330.75)


@pytest.mark.asyncio
async def test_denied_steps_count_as_zero(db_session):
    provider = StaticStepCountProvider(StepCountResult(status=StepCountStatus.DENIED, steps=0))
    summary = await build_today_summary(db_session, None, provider, now=NOW)
    assert summary.step_result.status == StepCountStatus.DENIED
    assert summary.step_distance_km == 0.0
    assert summary.step_calories_kcal == 0.0
    assert summary.workouts == []


@pytest.mark.asyncio
async def test_steps_follow_the_summary_day(db_session):
    StepCountRepository.record(db_session, date(2024, 1, 15), 6500)
    StepCountRepository.record(db_session, date(2024, 1, 16), 300)
    # provider clock already past midnight
    provider = StoredStepCountProvider(
        get_session_factory(),
        authorized=True,
        clock=lambda: datetime(2024, 1, 16, 0, 5, tzinfo=UTC),
    )

    summary = await build_today_summary(db_session, None, provider, now=NOW)

    assert summary.step_result.day == date(2024, 1, 15)
    assert summary.step_result.steps == 6500
