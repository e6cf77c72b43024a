"""Persistence tests for workout, profile, weight and step repositories.

Tests cover:
- Save then load returns field-identical records
- Edits keep id and date
- Missing records raise RecordNotFoundError
- Only one profile can be stored
"""

from datetime import UTC, date, datetime

import pytest

from fitness_tracker.core.errors import ProfileExistsError, RecordNotFoundError
from fitness_tracker.models.records import Gender, UserProfile, WeightMeasurement, WorkoutRecord
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.step_count_repository import StepCountRepository
from fitness_tracker.repositories.weight_repository import WeightRepository
from fitness_tracker.repositories.workout_repository import WorkoutRepository
from fitness_tracker.workouts.validation import WorkoutInput


class TestWorkoutRepository:
    def test_round_trip(self, db_session):
        record = WorkoutRecord(
            date=datetime(2024, 3, 15, 7, 30, 12, tzinfo=UTC),
            total_duration_minutes=45.5,
            running_duration_minutes=15.25,
            running_speed_kmh=10.3,
            walking_speed_kmh=5.1,
        )
        WorkoutRepository.create(db_session, record)
        db_session.expire_all()

        assert WorkoutRepository.get(db_session, record.id) == record
        assert WorkoutRepository.list_all(db_session) == [record]

    def test_replace_keeps_id_and_date(self, db_session):
        record = WorkoutRepository.create(
            db_session,
            WorkoutRecord(
                date=datetime(2024, 3, 15, 7, 30, tzinfo=UTC),
                total_duration_minutes=30,
                running_duration_minutes=10,
                running_speed_kmh=9.0,
                walking_speed_kmh=5.0,
            ),
        )
        updated = WorkoutRepository.replace(
            db_session,
            record.id,
            WorkoutInput(total_duration_minutes=40, running_duration_minutes=20, running_speed_kmh=11.0, walking_speed_kmh=6.0),
        )
        assert updated.id == record.id
        assert updated.date == record.date
        assert updated.total_duration_minutes == 40
        assert updated.running_speed_kmh == 11.0

    def test_delete(self, db_session):
        record = WorkoutRepository.create(db_session, WorkoutRecord(total_duration_minutes=10, running_duration_minutes=0, running_speed_kmh=0, walking_speed_kmh=4))
        WorkoutRepository.delete(db_session, record.id)
        assert WorkoutRepository.list_all(db_session) == []
        with pytest.raises(RecordNotFoundError):
            WorkoutRepository.get(db_session, record.id)

    def test_missing_workout(self, db_session):
        with pytest.raises(RecordNotFoundError):
            WorkoutRepository.delete(db_session, "missing")


class TestProfileRepository:
    def test_round_trip(self, db_session):
        profile = UserProfile(weight_kg=82.5, height_cm=181.0, gender=Gender.FEMALE, daily_steps_goal=12000)
        ProfileRepository.create(db_session, profile)
        db_session.expire_all()
        assert ProfileRepository.get(db_session, profile.id) == profile

    def test_second_profile_is_rejected(self, db_session):
        ProfileRepository.create(db_session, UserProfile())
        with pytest.raises(ProfileExistsError):
            ProfileRepository.create(db_session, UserProfile())

    def test_get_or_default(self, db_session):
        fallback = ProfileRepository.get_or_default(db_session, "unknown")
        assert fallback.id == "unknown"
        assert fallback.weight_kg == 70.0
        assert fallback.height_cm == 175.0
        assert fallback.gender == Gender.MALE
        assert fallback.daily_steps_goal == 10000
        # the default is transient
        with pytest.raises(RecordNotFoundError):
            ProfileRepository.get(db_session, "unknown")

    def test_update(self, db_session):
        profile = ProfileRepository.create(db_session, UserProfile())
        updated = ProfileRepository.update(db_session, profile.model_copy(update={"weight_kg": 75.0}))
        assert updated.weight_kg == 75.0
        assert ProfileRepository.get(db_session, profile.id).weight_kg == 75.0


class TestWeightRepository:
    def test_round_trip(self, db_session):
        measurement = WeightMeasurement(date=datetime(2024, 2, 1, 8, 0, tzinfo=UTC), weight_kg=71.4)
        WeightRepository.create(db_session, measurement)
        db_session.expire_all()
        assert WeightRepository.get(db_session, measurement.id) == measurement

    def test_latest(self, db_session):
        assert WeightRepository.latest(db_session) is None
        WeightRepository.create(db_session, WeightMeasurement(date=datetime(2024, 2, 1, tzinfo=UTC), weight_kg=72.0))
        WeightRepository.create(db_session, WeightMeasurement(date=datetime(2024, 2, 3, tzinfo=UTC), weight_kg=71.0))
        WeightRepository.create(db_session, WeightMeasurement(date=datetime(2024, 2, 2, tzinfo=UTC), weight_kg=71.5))
        assert WeightRepository.latest(db_session).weight_kg == 71.0


class TestStepCountRepository:
    def test_record_and_overwrite(self, db_session):
        day = date(2024, 2, 1)
        assert StepCountRepository.get_for_day(db_session, day) is None
        StepCountRepository.record(db_session, day, 4200)
        StepCountRepository.record(db_session, day, 6100)
        assert StepCountRepository.get_for_day(db_session, day) == 6100
